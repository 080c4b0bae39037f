import plistlib

from scheduler_studio.core.types_and_enums import EncodingError, DecodingError


class ContainerCodec:
    """
    Turns a whole serialized collection (a list of plain dicts) into bytes and back.
    Record conversion is the store's job, codecs never see record types.
    """
    def dumpData(self, data: list) -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement dumpData()")

    def loadData(self, raw: bytes):
        raise NotImplementedError(f"{self.__class__.__name__} must implement loadData()")

    def encode(self, data: list) -> bytes:
        try:
            return self.dumpData(data)
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodingError(f"Could not encode container: {e}") from e

    def decode(self, raw: bytes) -> list:
        try:
            data = self.loadData(raw)
        except Exception as e:
            raise DecodingError(f"Container is not valid: {e}") from e

        if not isinstance(data, list):
            raise DecodingError(f"Expected a list of records, got {type(data).__name__}")
        return data


class PropertyListCodec(ContainerCodec):
    def __init__(self, fmt=plistlib.FMT_BINARY):
        self.fmt = fmt

    def dumpData(self, data: list) -> bytes:
        return plistlib.dumps(data, fmt=self.fmt)

    def loadData(self, raw: bytes):
        # Format is sniffed from the header so XML and binary both load
        return plistlib.loads(raw)
