"""playnav: jump from a cursor position in an Ansible document to the file it references."""

__version__ = "0.1.0"
