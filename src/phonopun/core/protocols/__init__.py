from .aligner import AlignerProtocol

__all__ = ["AlignerProtocol"]
