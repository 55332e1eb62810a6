"""MongoDB adapters."""

USERS_COLLECTION_NAME = 'users'
RESET_TOKENS_COLLECTION_NAME = 'resettokens'
INSPECTIONS_COLLECTION_NAME = 'inspections'
INFO_COLLECTION_NAME = 'infos'
