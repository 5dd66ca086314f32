"""Constants for dirsum."""

# Digest used by the md5 command and when nothing else is configured
DEFAULT_ALGORITHM = "md5"

# Bytes read per file chunk while hashing
DEFAULT_CHUNK_SIZE = 8192

# Environment overrides
CONFIG_ENV_VAR = "DIRSUM_CONFIG"
ALGORITHM_ENV_VAR = "DIRSUM_ALGORITHM"

# Version
DIRSUM_VERSION = "0.1.0"
