# --                                                            ; {{{1
#
# File        : glsl_mode/pattern.py
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
Pattern compiler: word lists & structural templates -> matchers.

Matches are whole-word only; the underscore is an identifier
character.

>>> m = compile_words(["vec4", "vec3", "mat4"])
>>> list(m.finditer("vec4 vec4_foo my_vec4 mat4x"))
[(0, 4)]
>>> list(m.finditer("vec3(vec4(1))"))
[(0, 4), (5, 9)]
>>> m.search("float x; vec4 y;")
(9, 13)
>>> m.search("float x;") is None
True

An empty word set never matches:

>>> list(compile_words([]).finditer("anything at all"))
[]
"""                                                             # }}}1

import logging, regex, sys

from pygments.regexopt import regex_opt

from . import misc as M
from .data import PRECEDENCE
from .tables import TableEntry

log = logging.getLogger(__name__)

FLAGS = regex.MULTILINE

def words_rx(words):                                            # {{{1
  """
  Optimised alternation of the words (unanchored); never matches if
  there are none.

  >>> rx = words_rx(["foo", "bar", "baz"])
  >>> [ bool(regex.fullmatch(rx, w)) for w in "bar baz foo ba".split() ]
  [True, True, True, False]
  >>> words_rx(["", "x"])
  '(x)'
  >>> words_rx([])
  '(?!)'
  """

  ws = sorted(set( w for w in words if w ))
  return regex_opt(ws) if ws else M.RX_NEVER
                                                                # }}}1

def entry_rx(entry):                                            # {{{1
  r"""
  Regex for a table entry.

  >>> entry_rx(TableEntry(frozenset(["in", "out"]), None))
  '(?<![A-Za-z0-9_])(in|out)(?![A-Za-z0-9_])'
  >>> entry_rx(TableEntry(frozenset(), "x+"))
  'x+'
  >>> entry_rx(TableEntry(frozenset(["if"]), "#{words}"))
  '#(if)'
  >>> entry_rx(TableEntry(frozenset(), None))
  '(?!)'
  """

  words, tmpl = entry
  if tmpl and "{words}" in tmpl:
    return tmpl.replace("{words}", words_rx(words))
  alts = []
  if any(words):
    alts.append(M.RX_WORD_START + words_rx(words) + M.RX_WORD_END)
  if tmpl: alts.append(tmpl)
  return "|".join(alts) or M.RX_NEVER
                                                                # }}}1

class Matcher:                                                  # {{{1
  """Compiled matcher for one category."""

  def __init__(self, rx, category = None):
    self.rx         = rx
    self.category   = category
    self._compiled  = regex.compile(rx, FLAGS)
    self._group     = "m" if "m" in self._compiled.groupindex else 0

  def __repr__(self):
    return "<Matcher {}>".format(self.category or self.rx)

  def finditer(self, text, pos = 0, endpos = None):
    """Yield (start, end) of all matches in text[pos:endpos]."""
    if endpos is None: endpos = len(text)
    for m in self._compiled.finditer(text, pos, endpos):
      yield m.span(self._group)

  def search(self, text, pos = 0, endpos = None):
    """(start, end) of the next match or None."""
    if endpos is None: endpos = len(text)
    m = self._compiled.search(text, pos, endpos)
    return m.span(self._group) if m else None
                                                                # }}}1

def compile_words(words, category = None):
  """Matcher for a plain word list."""
  return compile_entry(TableEntry(frozenset(words), None), category)

def compile_entry(entry, category = None):
  return Matcher(entry_rx(entry), category)

def compile_table(table):                                       # {{{1
  """
  Compile a category table into matchers in precedence order.

  >>> from .tables import category_table
  >>> ms = compile_table(category_table())
  >>> [ m.category.value for m in ms ][:3]
  ['preprocessor', 'type', 'deprecated-keyword']
  >>> p = ms[0]
  >>> p.search("   #   define FOO")
  (3, 13)
  >>> p.search("x # define FOO") is None
  True
  >>> p.search("#defined") is None
  True
  >>> v = ms[-2]
  >>> list(v.finditer("gl_Position glPosition gl_foo gl_in"))
  [(0, 11), (30, 35)]
  >>> e = ms[-1]
  >>> list(e.finditer("#extension GL_ARB_shader_draw_parameters"))
  [(11, 40)]
  """

  ms = []
  for c in PRECEDENCE:
    entry = table.get(c)
    if entry is None: continue
    ms.append(compile_entry(entry, c))
    log.debug("compiled %s: %d words%s", c, len(entry.words),
              " + template" if entry.template else "")
  return ms
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
