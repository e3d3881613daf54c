# --                                                            ; {{{1
#
# File        : glsl_mode/config.py
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
Configuration: additional words per category (the extension
registry), documentation URL settings, and a reader for config files.

Additional words are merged into a fresh copy of the reference
table; they never remove anything.  Malformed entries are dropped and
reported through on_warning (or the logger when there is none).

>>> msgs = []
>>> c = Config({ "keyword": ["foo", "bad word"], "colour": ["red"] },
...            on_warning = msgs.append)
>>> t = c.merged_table()
>>> "foo" in t[Category.KEYWORD].words, "while" in t[Category.KEYWORD].words
(True, True)
>>> for m in msgs: print(m)
dropping malformed keyword word: 'bad word'
dropping words for unknown category: 'colour'

>>> cfg = parse_config('''
... ; extra words
... additional-types = float16_t, f16vec4
... built-ins        = myNoise
... man-pages-base-url = "https://example.org/glsl/"
... ''')
>>> sorted(cfg.registry["additional-types"])
['f16vec4', 'float16_t']
>>> cfg.man_pages_base_url
'https://example.org/glsl/'
"""                                                             # }}}1

import logging, sys, types

from collections import namedtuple

import pyparsing as P

from . import misc as M
from .data import Category, ConfigError
from .tables import category_table

log = logging.getLogger(__name__)

DEFAULT_MAN_PAGES_BASE_URL  = \
  "https://registry.khronos.org/OpenGL-Refpages/gl4/html/"
DEFAULT_MAN_PAGES_SUFFIX    = ".xhtml"

K_BASE_URL, K_SUFFIX        = "man-pages-base-url", "man-pages-suffix"
S_ADDITIONAL                = "additional-"

def category_for(key):                                          # {{{1
  """
  Category for a registry key; accepts categories, names, plurals and
  an additional- prefix.

  >>> category_for("additional-built-ins")
  <Category.BUILTIN: 'builtin'>
  >>> category_for("Types")
  <Category.TYPE: 'type'>
  >>> category_for("deprecated_variables")
  <Category.DEPRECATED_VARIABLE: 'deprecated-variable'>
  >>> category_for(Category.EXTENSION)
  <Category.EXTENSION: 'extension'>
  >>> category_for("colour") is None
  True
  """

  if isinstance(key, Category): return key
  k = str(key).strip().lower().replace("_", "-")
  if k.startswith(S_ADDITIONAL): k = k[len(S_ADDITIONAL):]
  k = k.replace("built-in", "builtin")
  c = Category.lookup(k)
  if c is None and k.endswith("s"): c = Category.lookup(k[:-1])
  return c
                                                                # }}}1

def _freeze(words):
  if isinstance(words, (list, tuple, set, frozenset)): return tuple(words)
  return words

class Config(namedtuple("Config", """registry man_pages_base_url
                                     man_pages_suffix on_warning"""
                                  .split())):                   # {{{1
  """
  Immutable configuration.

  registry maps categories (or their names) to additional words;
  on_warning, when given, receives a message per dropped entry.

  >>> c = Config({ "keyword": ["foo"] })
  >>> c.registry["keyword"]
  ('foo',)
  >>> try: c.registry["type"] = ["bar"]
  ... except TypeError: print("read-only")
  read-only
  """

  def __new__(cls, registry = None,
              man_pages_base_url = DEFAULT_MAN_PAGES_BASE_URL,
              man_pages_suffix = DEFAULT_MAN_PAGES_SUFFIX,
              on_warning = None):
    frozen = { k: _freeze(v) for k, v in dict(registry or {}).items() }
    return super().__new__(cls, types.MappingProxyType(frozen),
                           man_pages_base_url, man_pages_suffix,
                           on_warning)

  def warn(self, msg):
    if self.on_warning is not None:
      self.on_warning(msg)
    else:
      log.warning("%s", msg)

  def additional_words(self):                                   # {{{2
    """
    Validated registry: Category -> frozenset of words.

    >>> c = Config({ "type": "half2 half3", Category.TYPE: ["half4"],
    ...              "builtin": ["", 42, "ok_1"] },
    ...            on_warning = print)
    >>> d = c.additional_words()
    dropping malformed builtin word: ''
    dropping malformed builtin word: 42
    >>> sorted(d[Category.TYPE]), sorted(d[Category.BUILTIN])
    (['half2', 'half3', 'half4'], ['ok_1'])
    """

    out = {}
    for key, words in self.registry.items():
      c = category_for(key)
      if c is None:
        self.warn("dropping words for unknown category: {!r}"
                  .format(key))
        continue
      if isinstance(words, str):
        words = words.replace(",", " ").split()
      elif not isinstance(words, (list, tuple, set, frozenset)):
        self.warn("dropping malformed {} words: {!r}".format(c, words))
        continue
      ok = out.setdefault(c, set())
      for w in words:
        if M.isident(w):
          ok.add(w)
        else:
          self.warn("dropping malformed {} word: {!r}".format(c, w))
    return { c: frozenset(ws) for c, ws in out.items() }
                                                                # }}}2

  def merged_table(self, base = None):
    """Fresh category table with the additional words merged in."""
    table = dict(base or category_table())
    for c, ws in self.additional_words().items():
      table[c] = table[c].merge(ws)
    return table
                                                                # }}}1

# === Config files ===

def _make_parser():                                             # {{{1
  # NB: a value must not look like the start of the next entry
  # (key =), since entries may continue over several lines.

  r, s        = P.Regex, P.Suppress
  n           = lambda x, name: x.set_name(name)

  comm        = n(r(r";.*"), "comment")
  key         = n(r(r"[A-Za-z][A-Za-z0-9_-]*"), "key")
  eq          = s("=")
  qstr        = n(P.QuotedString('"', esc_char = "\\"), "string")
  word        = n(~(key + eq) + r(r'[^\s,;="]+'), "word")
  value       = qstr | word
  values      = P.Group(P.ZeroOrMore(value + s(P.Optional(","))))
  entry       = P.Group(key + eq + values)
  return (P.ZeroOrMore(entry) + P.StringEnd()).ignore(comm)
                                                                # }}}1

_parser = _make_parser()

def parse_entries(text):                                        # {{{1
  """
  Parse config file contents into (key, values) pairs.

  >>> parse_entries('keywords = a b ; c\\n  d, e\\ntypes=\\n')
  [('keywords', ['a', 'b', 'd', 'e']), ('types', [])]
  >>> parse_entries('')
  []
  >>> try: parse_entries('= oops')
  ... except ConfigError as e: print(str(e)[:17])
  line 1, column 1:
  """

  try:
    res = _parser.parse_string(text, parse_all = True)
  except P.ParseException as e:
    raise ConfigError("line {}, column {}: {}"
                      .format(e.lineno, e.col, e.msg)) from e
  return [ (k, list(vs)) for k, vs in res ]
                                                                # }}}1

def parse_config(text, on_warning = None):
  """Parse config file contents into a Config."""
  registry, urls = {}, {}
  for k, vs in parse_entries(text):
    kl = k.lower()
    if kl in (K_BASE_URL, K_SUFFIX):
      urls[kl] = "".join(vs)
    else:
      registry.setdefault(k, []).extend(vs)
  return Config(registry,
                urls.get(K_BASE_URL, DEFAULT_MAN_PAGES_BASE_URL),
                urls.get(K_SUFFIX, DEFAULT_MAN_PAGES_SUFFIX),
                on_warning)

def load_config(name, on_warning = None):
  """Read a config file."""
  try:
    with open(name) as f:
      text = f.read()
  except OSError as e:
    raise ConfigError("cannot read {}: {}".format(name, e)) from e
  return parse_config(text, on_warning = on_warning)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
