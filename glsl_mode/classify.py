# --                                                            ; {{{1
#
# File        : glsl_mode/classify.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2022-03-13
#
# Copyright   : Copyright (C) 2022  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Classifier: text -> non-overlapping spans, sorted by position.

Every category's matcher is run in precedence order; a match that
overlaps an already accepted match (i.e. one of a higher-precedence
category) is dropped.  Text that matches nothing (identifiers,
literals, punctuation, comments, strings) is left alone.

>>> src = '''#version 450
... layout(location = 0) in vec4 pos;
... void main() { gl_Position = pos; }
... '''
>>> for s in classify(src): print(s, repr(s.text(src)))
Span(0, 8, preprocessor) '#version'
Span(13, 19, qualifier) 'layout'
Span(34, 36, qualifier) 'in'
Span(37, 41, type) 'vec4'
Span(47, 51, type) 'void'
Span(61, 72, variable) 'gl_Position'

Words in more than one category get the higher-precedence one:

>>> classify("attribute vec3 n;")[0]
Span(0, 9, deprecated-keyword)
>>> classify("varying")
[Span(0, 7, deprecated-keyword)]

Whole words only:

>>> classify("vec4_foo my_vec4 vec4")
[Span(17, 21, type)]

The rest of a preprocessor line is classified independently:

>>> src = "   #   define FOO vec4(gl_FragColor)"
>>> [ (s.category.value, s.text(src)) for s in classify(src) ]
[('preprocessor', '#   define'), ('type', 'vec4'), ('deprecated-variable', 'gl_FragColor')]

>>> classify("#extension GL_ARB_shader_draw_parameters : enable")
[Span(0, 10, preprocessor), Span(11, 40, extension)]
>>> classify("glPosition gl_position")
[]
>>> classify("")
[]
"""                                                             # }}}1

import bisect, functools, logging, sys

from . import misc as M
from . import pattern as P

from .config import Config
from .data import OutOfRangeError, Span

log = logging.getLogger(__name__)

class Classifier:                                               # {{{1
  """
  Compiled classifier; read-only once constructed.

  >>> msgs = []
  >>> c = Classifier(Config({ "keyword": ["foo", "4oo"] },
  ...                       on_warning = msgs.append))
  >>> msgs
  ["dropping malformed keyword word: '4oo'"]
  >>> c.classify("foo vec4 bar")
  [Span(0, 3, keyword), Span(4, 8, type)]
  """

  def __init__(self, config = None):
    self.config   = config if config is not None else Config()
    self.table    = self.config.merged_table()
    self.matchers = P.compile_table(self.table)

  def classify(self, text, start = 0, end = None):              # {{{2
    """
    Classify text, or only the part of it in [start, end).

    For a sub-range, every span overlapping it is returned (in full);
    the result equals that of classifying all of the text and keeping
    those spans.

    >>> c = default_classifier()
    >>> src = "float a;\\nvec2 b; vec3 c;\\nint d;"
    >>> c.classify(src, 12, 13)
    [Span(9, 13, type)]
    >>> c.classify(src, 14, 20)
    [Span(17, 21, type)]
    >>> c.classify(src, 9, 9)
    [Span(9, 13, type)]
    >>> c.classify(src, 8, 8)
    []
    >>> c.classify(src, 0, len(src)) == c.classify(src)
    True
    >>> try: c.classify(src, 5, 99)
    ... except OutOfRangeError as e: print(e)
    range out of bounds: [5, 99) not within [0, 31]
    >>> try: c.classify(src, 3, 2)
    ... except IndexError as e: print(e)
    range out of bounds: [3, 2) not within [0, 31]
    """

    n = len(text)
    if end is None: end = n
    if not 0 <= start <= end <= n:
      raise OutOfRangeError(start, end, n)
    if start == 0 and end == n:
      return self._resolve(text, 0, n)
    lo, hi = M.line_bounds(text, start, end)
    return [ s for s in self._resolve(text, lo, hi)
               if s.overlaps(start, end) ]
                                                                # }}}2

  def _resolve(self, text, pos, endpos):
    starts, spans = [], []
    for m in self.matchers:
      for s, e in m.finditer(text, pos, endpos):
        i = bisect.bisect_right(starts, s)
        if i and spans[i-1].end > s: continue
        if i < len(spans) and spans[i].start < e: continue
        starts.insert(i, s); spans.insert(i, Span(s, e, m.category))
    return spans

  def classify_word(self, word):
    """
    Category of an isolated word (or None).

    >>> c = default_classifier()
    >>> c.classify_word("texture2D"), c.classify_word("texture")
    (<Category.DEPRECATED_BUILTIN: 'deprecated-builtin'>, <Category.BUILTIN: 'builtin'>)
    >>> c.classify_word("foo") is None, c.classify_word("vec4 x") is None
    (True, True)
    """
    spans = self.classify(word)
    if len(spans) == 1 and spans[0][:2] == (0, len(word)):
      return spans[0].category
    return None
                                                                # }}}1

@functools.lru_cache(maxsize = None)
def default_classifier():
  """Shared classifier for the default configuration."""
  log.debug("compiling default classifier")
  return Classifier()

def classify(text, config = None, start = 0, end = None):
  """Classify text (using the default classifier unless configured)."""
  c = default_classifier() if config is None else Classifier(config)
  return c.classify(text, start, end)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
