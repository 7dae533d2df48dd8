# Error kinds raised while converting a single TEX file.
#
# Every one of them aborts only the file being converted; the command line
# front end reports it and moves on to the next path.
#


class TexError(Exception):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class OpenError(TexError):
    pass


class WriteError(TexError):
    pass


# Malformed or short source data #

class TexFormatError(TexError, ValueError):
    pass


class InvalidDimensions(TexFormatError):
    pass


class TruncatedData(TexFormatError):
    pass


class TruncatedPalette(TexFormatError):
    pass
