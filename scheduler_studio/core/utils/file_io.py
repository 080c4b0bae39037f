import os


class FileIO:
    DOCUMENTS_DIR_ENV = "SCHEDULER_DOCUMENTS_DIR"
    DOCUMENTS_DIR_NAME = "Documents"

    @staticmethod
    def documentsDirectory() -> str:
        """
        The application-private writable directory stores resolve their files into.
        Uses $SCHEDULER_DOCUMENTS_DIR when set, otherwise ./Documents.
        """
        env_dir = os.environ.get(FileIO.DOCUMENTS_DIR_ENV, "").strip()
        if env_dir:
            return os.path.abspath(env_dir)
        return os.path.join(os.getcwd(), FileIO.DOCUMENTS_DIR_NAME)

    @staticmethod
    def getPath(filename: str, directory: str = None) -> str:
        if directory is None:
            directory = FileIO.documentsDirectory()
        return os.path.join(directory, filename)

    @staticmethod
    def readBytes(filepath: str) -> bytes:
        """Reads the whole file. OSError propagates to the caller."""
        with open(filepath, 'rb') as f:
            return f.read()

    @staticmethod
    def writeAtomic(data: bytes, filepath: str):
        """
        Writes data next to the target first, then swaps it into place,
        so readers never see a half written file.
        Raises OSError if any step fails; the temp file is cleaned up.
        """
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
        tmp_path = filepath + ".tmp"
        try:
            with open(tmp_path, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, filepath)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
