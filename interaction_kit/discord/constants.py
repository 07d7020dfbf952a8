# Message content limit, counted in unicode code points.
MESSAGE_CODE_LIMIT = 2000
EMBED_MAX_COUNT = 10
ACTION_ROW_MAX_COUNT = 5

# Message flag bits used by response builders.
MESSAGE_FLAG_EPHEMERAL = 1 << 6
