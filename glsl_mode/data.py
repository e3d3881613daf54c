# --                                                            ; {{{1
#
# File        : glsl_mode/data.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2022-03-12
#
# Copyright   : Copyright (C) 2022  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Categories, spans & errors.

>>> PRECEDENCE[0], PRECEDENCE[-1]
(<Category.PREPROCESSOR: 'preprocessor'>, <Category.EXTENSION: 'extension'>)
>>> Span(0, 4, Category.TYPE)
Span(0, 4, type)
>>> Span(0, 4, Category.TYPE).text("vec4 x;")
'vec4'
"""                                                             # }}}1

import enum, sys

from collections import namedtuple

# === Exceptions ===

class GlslModeError(Exception):
  """Base class for glsl-mode errors"""

class OutOfRangeError(GlslModeError, IndexError):
  """Invalid offset range."""
  def __init__(self, start, end, size):
    super().__init__("range out of bounds: [{}, {}) not within [0, {}]"
                     .format(start, end, size))
    self.start, self.end, self.size = start, end, size

class ConfigError(GlslModeError):
  """Invalid configuration file."""

# === Categories ===

class Category(enum.Enum):                                      # {{{1
  """Lexical category."""

  PREPROCESSOR          = "preprocessor"
  TYPE                  = "type"
  DEPRECATED_KEYWORD    = "deprecated-keyword"
  RESERVED_KEYWORD      = "reserved-keyword"
  QUALIFIER             = "qualifier"
  KEYWORD               = "keyword"
  PREPROCESSOR_BUILTIN  = "preprocessor-builtin"
  DEPRECATED_BUILTIN    = "deprecated-builtin"
  BUILTIN               = "builtin"
  DEPRECATED_VARIABLE   = "deprecated-variable"
  VARIABLE              = "variable"
  EXTENSION             = "extension"

  def __str__(self): return self.value

  @classmethod
  def lookup(cls, name):
    """
    Look up a category by name; case, - and _ are interchangeable.

    >>> Category.lookup("Deprecated_Builtin")
    <Category.DEPRECATED_BUILTIN: 'deprecated-builtin'>
    >>> Category.lookup(Category.TYPE)
    <Category.TYPE: 'type'>
    >>> Category.lookup("types") is None
    True
    """

    if isinstance(name, cls): return name
    if not isinstance(name, str): return None
    return _BY_NAME.get(name.strip().lower().replace("_", "-"))
                                                                # }}}1

_BY_NAME = { c.value: c for c in Category }

# highest first; a match overlapping an already accepted match of an
# earlier category is dropped
PRECEDENCE = (
  Category.PREPROCESSOR,
  Category.TYPE,
  Category.DEPRECATED_KEYWORD,
  Category.RESERVED_KEYWORD,
  Category.QUALIFIER,
  Category.KEYWORD,
  Category.PREPROCESSOR_BUILTIN,
  Category.DEPRECATED_BUILTIN,
  Category.BUILTIN,
  Category.DEPRECATED_VARIABLE,
  Category.VARIABLE,
  Category.EXTENSION,
)

# === Spans ===

class Span(namedtuple("Span", "start end category".split())):
  """Classified token occurrence: [start, end) + category."""

  def __repr__(self):
    return "Span({}, {}, {})".format(self.start, self.end, self.category)

  def text(self, s): return s[self.start:self.end]

  def overlaps(self, start, end):
    """
    >>> s = Span(4, 8, Category.TYPE)
    >>> s.overlaps(0, 4), s.overlaps(7, 9), s.overlaps(5, 5)
    (False, True, True)
    """
    if start == end: return self.start <= start < self.end
    return self.start < end and start < self.end

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
