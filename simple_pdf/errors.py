class PDFException(Exception):
    pass


class PDFObjectIdError(PDFException):
    """
    Raised when the object table of a document is inconsistent:
    a forward reference resolved to an unexpected object ID,
    a reserved object was written twice,
    or an object was never written before the cross-reference table.
    """


class DocumentFinishedError(PDFException):
    "Raised when a document is used after finish() was called"
