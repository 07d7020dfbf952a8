from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    discord_api_base_url: str = "https://discord.com/api/v10"
    discord_bot_token: str = ""
    discord_http_timeout: float = 15.0
    discord_user_agent: str = "DiscordBot (https://github.com/interaction-kit/interaction-kit, 0.1.0)"

    log_level: str = "INFO"


settings = Settings()
