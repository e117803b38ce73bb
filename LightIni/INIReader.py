# Read an INI file into easy-to-access name/value pairs.
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations
from typing import Dict, List, Optional, Union

from .IniHandler import IniHandler
from .IniParser import IniParser
from .LineClassifier import DEFAULT_COMMENT_PREFIX
from .utils.exceptions import DuplicateSectionError, IniError, IniHandlerError, IniSyntaxError


class INIReader(IniHandler):
    """Handler that keeps global options and one option map per section.

    Options seen before the first section are globals. The last assignment of
    a key wins; a section name seen twice is rejected.
    """

    def __init__(self, filename: Optional[str] = None, buffer: Optional[Union[bytes, str]] = None,
                 comment_prefix: str = DEFAULT_COMMENT_PREFIX):
        self.globals: Dict[str, str] = {}
        self.sections: Dict[str, Dict[str, str]] = {}
        self.comments: List[str] = []
        self.error: Optional[IniError] = None
        self._section_name: Optional[str] = None
        self._error: int = 0
        if filename is not None and buffer is not None:
            raise ValueError("Provide either filename or buffer, not both.")
        if filename is None and buffer is None:
            # Empty reader, filled by an external IniParser
            return
        parser = IniParser(self, comment_prefix)
        try:
            if filename is not None:
                parser.parse_file(filename)
            else:
                parser.parse_string(buffer)
        except IniError as e:
            self.error = e
            self._error = self._error_code(e)

    # --- handler callbacks ---

    def section(self, name: str) -> None:
        if name in self.sections:
            raise DuplicateSectionError(name)
        self.sections[name] = {}
        self._section_name = name

    def option(self, key: str, value: str) -> None:
        if self._section_name is None:
            self.globals[key] = value
        else:
            self.sections[self._section_name][key] = value

    def comment(self, text: str) -> None:
        self.comments.append(text)

    # --- accessors ---

    def ParseError(self) -> int:
        """0 on success, the line number of the first error, or -1 if the input couldn't be read."""
        return self._error

    def Get(self, section: str, name: str, default_value: Optional[str] = None) -> Optional[str]:
        """Look up an option; section "" addresses the global options."""
        options = self.globals if section == "" else self.sections.get(section, {})
        return options.get(name, default_value)

    def GetString(self, section: str, name: str, default_value: str) -> str:
        s = self.Get(section, name, "")
        return s if s != "" else default_value

    def HasSection(self, section: str) -> bool:
        return section in self.sections

    def HasValue(self, section: str, name: str) -> bool:
        return self.Get(section, name) is not None

    def Sections(self) -> List[str]:
        return list(self.sections)

    @staticmethod
    def _error_code(error: IniError) -> int:
        if isinstance(error, (IniSyntaxError, IniHandlerError)):
            return error.line_number
        return -1
