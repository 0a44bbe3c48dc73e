# Word character sets
ALPHANUM = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
)
NON_WHITESPACE_CHARS = "NON_WHITESPACE_CHARS"  # sentinel: classify whitespace only

WHITESPACE = {" ", "\t"}

# Register receiving killed text (Vim's small delete register)
SMALL_DELETE_REGISTER = "-"

# Single-line comment leaders by filetype
COMMENT_LEADERS = {
    "c": ["//"],
    "javascript": ["//"],
    "lua": ["--"],
    "python": ["#"],
}

# Vim mode() -> whether the cursor is drawn as a block
BLOCK_CURSOR_MODES = {
    "n": True,
    "no": True,
    "nov": True,
    "noV": True,
    "noCTRL-V": True,
    "niI": True,
    "niR": True,
    "niV": True,
    "nt": True,
    "v": True,
    "vs": True,
    "V": True,
    "Vs": True,
    "CTRL-V": True,
    "CTRL-Vs": True,
    "s": True,
    "S": True,
    "CTRL-S": True,
    "i": False,
    "ic": False,
    "ix": False,
    "R": False,
    "Rc": False,
    "Rx": False,
    "Rv": False,
    "Rvc": False,
    "Rvx": False,
    "c": False,
    "cv": False,
    "r": True,
    "rm": True,
    "r?": True,
    "!": True,
    "t": True,
}
