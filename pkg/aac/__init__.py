# AAC board: two-level image -> speech mappings with board file import/export
#
# Components:
#   category.py   - AACCategory (image location -> spoken text)
#   board.py      - AACBoard navigation state machine (home / in category)
#   board_file.py - Board file reader and writer
#   config.py     - BoardConfig loaded from YAML
#   errors.py     - ImageNotFound, BoardFileError, BoardFormatError
