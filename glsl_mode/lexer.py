# --                                                            ; {{{1
#
# File        : glsl_mode/lexer.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2022-03-14
#
# Copyright   : Copyright (C) 2022  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Pygments lexer & style for GLSL.

Base tokenization (comments, strings, numbers, punctuation) is done
by the C lexer; the classifier's spans then recolour everything that
isn't a comment or string.  Preprocessor text is recoloured too, so
macro bodies get their types, built-ins, etc.

>>> lx = GlslModeLexer()
>>> src = '''#define N 4
... uniform vec4 c; // vec4
... void main() { gl_FragColor = texture2D(t, uv); }
... '''
>>> for t, v in lx.get_tokens(src):
...   if t in TOKENS.values() and t is not Comment.Preproc:
...     print(str(t), v)
Token.Keyword.Declaration uniform
Token.Keyword.Type vec4
Token.Keyword.Type void
Token.Name.Variable.Deprecated gl_FragColor
Token.Name.Builtin.Deprecated texture2D

C keywords GLSL doesn't have are plain names:

>>> [ str(t) for t, v in lx.get_tokens("char x;") if v == "char" ]
['Token.Name']
"""                                                             # }}}1

import sys

import pygments
from pygments.formatters.terminal256 import TerminalTrueColorFormatter
from pygments.lexer import Lexer
from pygments.lexers.c_cpp import CLexer
from pygments.style import Style
from pygments.token import Comment, Error, Keyword, Name, Number, \
    Operator, String

from .classify import Classifier, default_classifier
from .config import load_config
from .data import Category

__all__ = ["GlslModeLexer", "GlslModeStyle", "highlight"]

FILENAMES = """
  *.glsl *.vert *.frag *.geom *.tesc *.tese *.comp
  *.vs *.fs *.gs *.tcs *.tes *.cs
  *.mesh *.task
  *.rgen *.rint *.rahit *.rchit *.rmiss *.rcall
""".split()

TOKENS = {
  Category.PREPROCESSOR         : Comment.Preproc,
  Category.TYPE                 : Keyword.Type,
  Category.DEPRECATED_KEYWORD   : Keyword.Deprecated,
  Category.RESERVED_KEYWORD     : Keyword.Reserved,
  Category.QUALIFIER            : Keyword.Declaration,
  Category.KEYWORD              : Keyword,
  Category.PREPROCESSOR_BUILTIN : Keyword.Pseudo,
  Category.DEPRECATED_BUILTIN   : Name.Builtin.Deprecated,
  Category.BUILTIN              : Name.Builtin,
  Category.DEPRECATED_VARIABLE  : Name.Variable.Deprecated,
  Category.VARIABLE             : Name.Variable.Magic,
  Category.EXTENSION            : Name.Constant,
}

# C lexer options for GLSL: no C standard library names
C_OPTIONS = dict(stdlibhighlighting = False, c99highlighting = False,
                 c11highlighting = False,
                 platformhighlighting = False)

def _opaque(tok):
  if tok in String or tok in Comment.PreprocFile: return True
  return tok in Comment and tok not in Comment.Preproc

def _plain(tok):
  return Name if tok in Keyword or tok in Name.Builtin else tok

class GlslModeLexer(Lexer):                                     # {{{1
  """
  Lexer for GLSL shaders.

  Options: config (a Config) or config_file (path of a config file).
  """

  name      = "GLSL (glsl-mode)"
  aliases   = ["glsl-mode"]
  filenames = FILENAMES
  mimetypes = ["text/x-glsl"]

  def __init__(self, **options):
    super().__init__(**options)
    cfg = options.get("config")
    if cfg is None and options.get("config_file"):
      cfg = load_config(options["config_file"])
    self.classifier = default_classifier() if cfg is None \
                      else Classifier(cfg)
    base = dict(C_OPTIONS, **options)
    base.pop("config", None); base.pop("config_file", None)
    self.base       = CLexer(**base)

  def get_tokens_unprocessed(self, text):
    spans, i = self.classifier.classify(text), 0
    for idx, tok, val in self.base.get_tokens_unprocessed(text):
      if _opaque(tok):
        yield idx, tok, val; continue
      end = idx + len(val)
      while i < len(spans) and spans[i].end <= idx: i += 1
      pos, j = idx, i
      while j < len(spans) and spans[j].start < end:
        s = spans[j]
        if s.start > pos:
          yield pos, _plain(tok), text[pos:s.start]
        hi = min(s.end, end)
        yield max(s.start, pos), TOKENS[s.category], \
              text[max(s.start, pos):hi]
        pos = hi
        if s.end > end: break
        j += 1
      if pos < end:
        yield pos, _plain(tok), text[pos:end]
                                                                # }}}1

class GlslModeStyle(Style):                                     # {{{1
  """Default-ish colours; deprecated & reserved words stand out."""

  name = "glsl-mode"

  styles = {
    Comment:                  "italic #408080",
    Comment.Preproc:          "noitalic #bc7a00",
    Keyword:                  "bold #008000",
    Keyword.Type:             "nobold #b00040",
    Keyword.Declaration:      "bold #7d4fa0",
    Keyword.Pseudo:           "nobold #bc7a00",
    Keyword.Deprecated:       "bold underline #b36b00",
    Keyword.Reserved:         "bold bg:#ffdddd #a00000",
    Name.Builtin:             "#0060b0",
    Name.Builtin.Deprecated:  "underline #b36b00",
    Name.Variable.Magic:      "#19177c",
    Name.Variable.Deprecated: "underline #b36b00",
    Name.Constant:            "#880000",
    String:                   "#ba2121",
    Number:                   "#666666",
    Operator:                 "#666666",
    Error:                    "border:#ff0000",
  }
                                                                # }}}1

def highlight(code, formatter = None, config = None):
  """Highlight code (for a true-colour terminal by default)."""
  if formatter is None:
    formatter = TerminalTrueColorFormatter(style = GlslModeStyle)
  return pygments.highlight(code, GlslModeLexer(config = config),
                            formatter)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
