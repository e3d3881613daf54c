# --                                                            ; {{{1
#
# File        : tests/test_doctests.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2022-03-14
#
# Copyright   : Copyright (C) 2022  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

# Runs the doctests of every module, plus a few checks over whole
# tables that would be tedious as doctests.

import threading

from glsl_mode import tables as T
from glsl_mode import __main__ as G
from glsl_mode.classify import Classifier, classify, default_classifier
from glsl_mode.config import Config
from glsl_mode.data import Category, PRECEDENCE

def test_doctests():
  assert G.test() == 0

def test_all_modules_import():
  import importlib, pkgutil, glsl_mode
  for x in pkgutil.iter_modules(glsl_mode.__path__):
    importlib.import_module("glsl_mode." + x.name)
  from glsl_mode.pattern import words_rx
  assert words_rx(["in", "out"]) == "(in|out)"

def test_config_registry_is_read_only():
  words = ["frob"]
  cfg = Config({ "builtin": words })
  words.append("nicate")
  assert cfg.registry["builtin"] == ("frob",)
  try:
    cfg.registry["keyword"] = ["x"]
  except TypeError:
    pass
  else:
    assert False, "registry is writable"

def _single_category_words():
  seen = {}
  for c, ws in T.WORDS.items():
    for w in ws: seen.setdefault(w, []).append(c)
  return { w: cs[0] for w, cs in seen.items() if len(cs) == 1 }

def test_isolated_words():
  c = default_classifier()
  for w, cat in _single_category_words().items():
    if cat is Category.PREPROCESSOR: continue
    for text, off in ((w, 0), ("  " + w + ";", 2)):
      assert c.classify(text) == [(off, off + len(w), cat)], (w, cat)

def test_directives():
  c = default_classifier()
  for w in T.PREPROCESSOR_DIRECTIVES:
    text = "  #  " + w + " x"
    s, = [ s for s in c.classify(text) if s.category is
             Category.PREPROCESSOR ]
    assert s.text(text) == "#  " + w

def test_overlaps_use_precedence():
  c, rank = default_classifier(), PRECEDENCE.index
  for w, cs in ((w, [ x for x in Category if w in T.WORDS[x] ])
                for ws in T.WORDS.values() for w in ws):
    if len(cs) < 2 or Category.PREPROCESSOR in cs: continue
    best = min(cs, key = rank)
    assert c.classify_word(w) is best, (w, cs)
    # registering it again elsewhere doesn't change the winner
    other = max(cs, key = rank)
    assert Classifier(Config({ other: [w] })).classify_word(w) is best

def test_extension_hook_is_additive():
  src = "in vec4 frobnicate; void main() { gl_Position = frob(x); }"
  cfg = Config({ "keyword": ["frobnicate"], "builtin": ["frob"] })
  old, new = classify(src), classify(src, cfg)
  assert set(old) < set(new)
  added = set(new) - set(old)
  assert sorted( (s.category.value, s.text(src)) for s in added ) == \
    [("builtin", "frob"), ("keyword", "frobnicate")]

def test_idempotent_and_threadsafe():
  with open(T.__file__) as f:
    src = f.read()
  c, res = default_classifier(), []
  ts = [ threading.Thread(target = lambda: res.append(c.classify(src)))
         for _ in range(4) ]
  for t in ts: t.start()
  for t in ts: t.join()
  assert len(res) == 4 and all( r == res[0] for r in res )

def test_sub_ranges_agree_with_full_text():
  src = "#version 450\nin vec3 n; // x\nvoid main()\n{ n = vec3(0); }\n"
  c, full = default_classifier(), default_classifier().classify(src)
  for a in range(0, len(src), 3):
    for b in range(a, len(src) + 1, 5):
      want = [ s for s in full if s.overlaps(a, b) ]
      assert c.classify(src, a, b) == want, (a, b)

def test_cli_spans(tmp_path, capsys):
  f = tmp_path / "x.frag"
  f.write_text("out vec4 color;\n")
  assert G.main(str(f)) == 0
  assert capsys.readouterr().out.splitlines() == \
    ["0 3 qualifier out", "4 8 type vec4"]
  assert G.main("--range", "99:100", str(f)) == 2

def test_cli_config(tmp_path, capsys):
  f, cfg = tmp_path / "x.frag", tmp_path / "glsl.cfg"
  f.write_text("half4 x;\n")
  cfg.write_text("additional-types = half4 ; 16-bit\n")
  assert G.main("--config", str(cfg), str(f)) == 0
  assert capsys.readouterr().out == "0 5 type half4\n"

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
