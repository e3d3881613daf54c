# --                                                            ; {{{1
#
# File        : glsl_mode/misc.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2017-11-20
#
# Copyright   : Copyright (C) 2017  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Regex fragments shared by the pattern compiler and the classifier.

GLSL identifiers are ASCII: letters, digits and underscore (an
identifier character, never a word boundary).  Word boundaries are
lookarounds on that class, so they don't depend on unicode flags.

>>> bool(regex.fullmatch(RX_WORD_START + "vec4" + RX_WORD_END, "vec4"))
True
"""                                                             # }}}1

import regex, sys

                                                                # {{{1
RX_IDENT_CHAR     = r"[A-Za-z0-9_]"
RX_IDENT          = r"[A-Za-z_][A-Za-z0-9_]*"
RX_IDENT_C        = regex.compile(RX_IDENT)

RX_WORD_START     = "(?<!" + RX_IDENT_CHAR + ")"
RX_WORD_END       = "(?!"  + RX_IDENT_CHAR + ")"

RX_NEVER          = r"(?!)"

# structural patterns
RX_PREPROC_HEAD   = r"^[ \t]*"
RX_PREPROC_HASH   = r"#[ \t]*"
RX_GL_VARIABLE    = r"gl_[A-Z][A-Za-z_]*"
RX_GL_EXTENSION   = r"GL_[A-Z]+_[A-Za-z][A-Za-z0-9_]*"

S_NEWLINE         = "\n"
                                                                # }}}1

def isident(s):                                                 # {{{1
  """
  Is the string a well-formed GLSL identifier?

  NB: does not check whether it is reserved.

  >>> isident("vec4")
  True
  >>> isident("_foo_1")
  True
  >>> isident("")
  False
  >>> isident("4vec")
  False
  >>> isident("foo-bar")
  False
  >>> isident("gl_Position ")
  False
  >>> isident("子猫")
  False
  >>> isident(42)
  False
  """

  return isinstance(s, str) and bool(RX_IDENT_C.fullmatch(s))
                                                                # }}}1

def line_bounds(text, start, end):                              # {{{1
  """
  Widen [start, end) to whole lines.

  >>> t = "foo\\nbar baz\\nqux"
  >>> line_bounds(t, 5, 6)
  (4, 11)
  >>> line_bounds(t, 0, len(t))
  (0, 15)
  >>> line_bounds(t, 4, 4)
  (4, 11)
  >>> line_bounds("", 0, 0)
  (0, 0)
  """

  lo = text.rfind(S_NEWLINE, 0, start) + 1
  hi = text.find(S_NEWLINE, end)
  return lo, (len(text) if hi == -1 else hi)
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
