# -*- coding: utf-8; -*-

"""Input formats for TagPolice (mainly for the command-line tool).

Every input format is implemented as a function with the following interface:

- it accepts a list of strings (tags or paths to files, depends on the format);
- it returns an iterable of ``(tag, remark)`` pairs, where `remark` says
  where the tag was found, or is `None`;
- it may raise :exc:`InputError` on fatal errors;
- it may pass through :exc:`EnvironmentError` on errors like invalid paths.
"""

from tagpolice.inputs.common import InputError, args_input
from tagpolice.inputs.lines import lines_input
from tagpolice.inputs.documents import xml_input


formats = {
    'args': args_input,
    'lines': lines_input,
    'xml': xml_input,
}
