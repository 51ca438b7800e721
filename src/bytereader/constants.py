class Constants:
    LOGGING = "logging"
    LEVEL = "level"
    DUMP = "dump"
    FORMAT = "format"
    COLUMNS = "columns"
    LIMIT = "limit"
    PASSES = "passes"
    # Byte renderings for dumps
    HEX = "hex"
    DEC = "dec"
    CHAR = "char"
    # Path argument meaning "read standard input"
    STDIN_PATH = "-"


CONFIG_ENV_VAR = "BYTEREADER_CONFIG"

DUMP_FORMATS = (Constants.HEX, Constants.DEC, Constants.CHAR)

DEFAULT_CONFIG = {
    Constants.LOGGING: {Constants.LEVEL: "WARNING"},
    Constants.DUMP: {
        Constants.FORMAT: Constants.HEX,
        Constants.COLUMNS: 16,
        Constants.LIMIT: None,
        Constants.PASSES: 1,
    },
}
