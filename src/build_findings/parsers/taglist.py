"""
Parser for the XML report of the Taglist Maven Plugin.

Class names are converted into assumed file names while parsing, so
``package.name.Class`` becomes ``package/name/Class.java``.

See https://www.mojohaus.org/taglist-maven-plugin/
"""

import xml.etree.ElementTree as ET
from typing import Optional

from ..core.parser import IssueParser
from ..io.reader import ReaderFactory
from ..models.report import Report
from ..utils.exceptions import ParsingError


class TaglistParser(IssueParser):
    """Creates one finding per tagged comment, grouped by tag and class."""

    parser_id = "taglist"

    root_tag = "report"
    tags_path = "tags/tag"
    files_path = "files/file"
    comments_path = "comments/comment"

    def parse(self, reader: ReaderFactory) -> Report:
        root = reader.read_document()
        report = Report()
        if root.tag != self.root_tag:
            report.log_info(f"Skipped document with root element <{root.tag}>")
            return report

        for tag in self._select(root, self.tags_path):
            category = tag.get("name", "")

            for file in self._select(tag, self.files_path):
                clazz = file.get("name")

                for comment in self._select(file, self.comments_path):
                    builder = self.create_builder().set_category(category)
                    if clazz:
                        builder.set_file_name(class_to_file(clazz))
                        builder.set_package_name(class_to_package(clazz))
                        builder.set_additional_properties(clazz)
                    builder.set_line_start(comment.findtext("lineNumber", default=""))
                    builder.set_message(comment.findtext("comment", default=""))

                    report.add(builder.build())

        return report

    def accepts(self, reader: ReaderFactory) -> bool:
        """Accept content that looks like an XML document."""
        return reader.read_string().lstrip().startswith("<")

    def _select(self, element: ET.Element, path: str) -> list[ET.Element]:
        try:
            return element.findall(path)
        except (SyntaxError, KeyError) as e:
            raise ParsingError(f"Invalid query path '{path}'", cause=e) from e


def class_to_file(clazz: str) -> str:
    return clazz.replace(".", "/") + ".java"


def class_to_package(clazz: str) -> Optional[str]:
    idx = clazz.rfind(".")
    return clazz[:idx] if idx > 0 else None
