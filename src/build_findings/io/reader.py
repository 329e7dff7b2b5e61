"""
Reader abstraction that hands already acquired tool output to the parsers.

The reader never opens files: callers pass the raw content as text or bytes.
Byte content is decoded with the declared encoding or, if none is given,
with the encoding detected by chardet.
"""

import re
import xml.etree.ElementTree as ET
from typing import Optional, Union

import chardet
from defusedxml.common import DefusedXmlException
from defusedxml.ElementTree import fromstring as defused_fromstring

from ..models.config import ReaderConfig
from ..utils.exceptions import ParsingError
from ..utils.logging import LoggerMixin

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


class ReaderFactory(LoggerMixin):
    """Provides the content of one tool report as text, lines or XML tree."""

    def __init__(
        self,
        content: Union[str, bytes],
        file_name: str = "",
        encoding: Optional[str] = None,
        config: Optional[ReaderConfig] = None,
    ):
        if not isinstance(content, (str, bytes)):
            raise TypeError("Content must be str or bytes")
        self._content = content
        self.file_name = file_name
        self.encoding = encoding
        self.config = config or ReaderConfig()
        self._text: Optional[str] = None

    def read_string(self) -> str:
        """Get the decoded content with BOM removed and normalized line endings."""
        if self._text is None:
            if isinstance(self._content, bytes):
                text = self._decode(self._content)
            else:
                text = self._content

            if text.startswith("\ufeff"):
                text = text[1:]
            if self.config.normalize_line_endings:
                text = text.replace("\r\n", "\n").replace("\r", "\n")
            self._text = text
        return self._text

    def read_lines(self) -> list[str]:
        """Get the decoded content split at line feeds only."""
        lines = self.read_string().split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line.rstrip("\r") for line in lines]

    def read_document(self) -> ET.Element:
        """
        Parse the content as XML document and return the root element.

        Documents with DTDs or entity declarations are rejected.

        Raises:
            ParsingError: If the content is not a well-formed, safe XML document
        """
        if isinstance(self._content, bytes) and self.encoding is None:
            source: Union[str, bytes] = self._content
        else:
            # The declaration may name an encoding that no longer applies
            source = _XML_DECLARATION.sub("", self.read_string(), count=1)

        try:
            return defused_fromstring(source, forbid_dtd=True)
        except (DefusedXmlException, ET.ParseError) as e:
            raise ParsingError(
                "Cannot parse XML document", cause=e, file_name=self.file_name
            ) from e

    def _decode(self, raw: bytes) -> str:
        encoding = self.encoding or self._detect_encoding(raw)
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            self.log_warning(
                "Primary encoding failed, decoding with replacement",
                file_name=self.file_name,
                primary=encoding,
                fallback=self.config.fallback_encoding,
            )
            return raw.decode(self.config.fallback_encoding, errors="replace")

    def _detect_encoding(self, raw: bytes) -> str:
        """Detect the encoding using chardet."""
        if not self.config.detect_encoding or not raw:
            return self.config.fallback_encoding

        sample = raw[: self.config.max_detection_bytes]
        detection_result = chardet.detect(sample)
        detected_encoding = detection_result.get("encoding")
        confidence = detection_result.get("confidence") or 0.0

        if detected_encoding and confidence >= self.config.min_confidence:
            self.log_debug(
                "Encoding detected",
                file_name=self.file_name,
                encoding=detected_encoding,
                confidence=confidence,
            )
            return detected_encoding

        self.log_debug(
            "Low confidence encoding detection, using fallback",
            file_name=self.file_name,
            detected=detected_encoding,
            confidence=confidence,
            fallback=self.config.fallback_encoding,
        )
        return self.config.fallback_encoding
