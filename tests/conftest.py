import pytest

from build_findings.io.reader import ReaderFactory

TAGLIST_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<report>
  <tags>
    <tag name="TODO" count="2">
      <files>
        <file name="com.example.cache.Store" count="2">
          <comments>
            <comment>
              <lineNumber>12</lineNumber>
              <comment>implement eviction</comment>
            </comment>
            <comment>
              <lineNumber>40</lineNumber>
              <comment>remove workaround</comment>
            </comment>
          </comments>
        </file>
      </files>
    </tag>
    <tag name="FIXME" count="1">
      <files>
        <file name="Main" count="1">
          <comments>
            <comment>
              <lineNumber>3</lineNumber>
              <comment>hard coded path</comment>
            </comment>
          </comments>
        </file>
      </files>
    </tag>
  </tags>
</report>
"""


@pytest.fixture
def make_reader():
    """Build a reader for in-memory content."""

    def _make(content, file_name="report.log", **kwargs):
        return ReaderFactory(content, file_name=file_name, **kwargs)

    return _make


@pytest.fixture
def taglist_report() -> str:
    return TAGLIST_REPORT
