from .file_io import FileIO
from .logger import global_logger

__all__ = [
    'FileIO',
    'global_logger'
]
