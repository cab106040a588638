"""NoticeHub - a local notice board for teachers and students."""

__version__ = "0.1.0"
