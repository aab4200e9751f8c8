"""
Project constants definitions
"""

# ============================================================
# Run Modes
# ============================================================

MODE_DEPLOY = "deploy"
MODE_GENERATE = "generate"
RUN_MODES = (MODE_DEPLOY, MODE_GENERATE)

# ============================================================
# Masks
# ============================================================

BUILTIN_IGNORE_MASKS = ("*.bak", ".svn", ".git*", "Thumbs.db", ".DS_Store", ".idea")
DEFAULT_PREPROCESS_MASKS = ("*.js", "*.css")

# ============================================================
# Remote Schemes
# ============================================================

SSH_SCHEMES = ("sftp", "ssh")
FTP_TLS_SCHEME = "ftps"

# ============================================================
# Default Values
# ============================================================

DEFAULT_DEPLOYMENT_FILE = ".htdeployment"
DEFAULT_TEMP_DIR_NAME = "sitedeploy"
DEFAULT_SSH_PORT = 22
DEFAULT_FTP_PORT = 21
DEFAULT_TIMEOUT = 30
TEMP_UPLOAD_SUFFIX = ".deploytmp"

# asset text is decoded losslessly so non-UTF-8 bytes pass through filters unchanged
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"

# ============================================================
# Preprocessor Commands
# ============================================================

JS_COMPRESS_COMMAND = ("uglifyjs", "--compress", "--mangle")
CSS_COMPRESS_COMMAND = ("cleancss",)

# ============================================================
# Logging
# ============================================================

DATE_FORMAT = "[%Y/%m/%d %H:%M]"
COLOR_STYLES = {
    "lime": "bright_green",
    "green": "green",
    "red": "red",
    "maroon": "dark_red",
    "navy": "blue",
    "aqua": "cyan",
    "gray": "bright_black",
    "silver": "white",
    "olive": "yellow",
}
