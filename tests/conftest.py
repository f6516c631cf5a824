"""Shared test fixtures for wikiparse."""

import pytest

from wikiparse.config import ParserConfig
from wikiparse.engine import ExtractionEngine

PYTHON_BODY = (
    "'''Python''' is a [[programming language]] created by "
    "[[Guido van Rossum|Guido]].{{cite web|title=About Python|url=https://python.org}}\n"
    "{{Infobox language|name=Python|influenced=[[Julia]]}}\n"
    "[[Category:Programming languages]]\n"
    "[[Category:Dynamically typed languages]]"
)

EXPORT_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<mediawiki xmlns="http://www.mediawiki.org/xml/export-0.10/" version="0.10" xml:lang="en">
  <siteinfo>
    <sitename>Wikipedia</sitename>
  </siteinfo>
  <page>
    <title>Python (programming language)</title>
    <ns>0</ns>
    <id>23862</id>
    <revision>
      <id>1100000001</id>
      <parentid>1099999999</parentid>
      <text xml:space="preserve">{PYTHON_BODY}</text>
    </revision>
  </page>
  <page>
    <title>Empty page</title>
    <ns>0</ns>
    <id>42</id>
    <revision>
      <id>7</id>
      <text xml:space="preserve" />
    </revision>
  </page>
</mediawiki>
"""

FLAT_XML = """<mediawiki>
  <page>
    <title>Flat</title>
    <id>99</id>
    <text>See [[Elsewhere]].</text>
  </page>
</mediawiki>
"""


@pytest.fixture
def export_xml():
    """A namespaced Special:Export document with two pages."""
    return EXPORT_XML


@pytest.fixture
def flat_xml():
    """A hand-written export with no namespace and no <revision> element."""
    return FLAT_XML


@pytest.fixture
def export_file(tmp_path):
    """The namespaced export written to disk."""
    path = tmp_path / "export.xml"
    path.write_text(EXPORT_XML, encoding="utf-8")
    return path


@pytest.fixture
def engine():
    """An ExtractionEngine with no capture limit."""
    return ExtractionEngine()


@pytest.fixture
def default_config():
    """Package defaults only, ignoring user and project config files."""
    return ParserConfig(paths=[])
