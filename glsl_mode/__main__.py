# --                                                            ; {{{1
#
# File        : glsl_mode/__main__.py
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
Command line interface: classify or highlight GLSL files.

>>> main("--doc", "smoothstep")
https://registry.khronos.org/OpenGL-Refpages/gl4/html/smoothstep.xhtml
0
>>> main("--doc", "vec4")
1
"""                                                             # }}}1

import argparse, logging, sys

from . import __version__
from . import classify as C
from . import doc as D
from . import lexer as L

from .config import load_config
from .data import GlslModeError

_me   = "glsl-mode"
_desc = "classify or highlight GLSL shader source"

log   = logging.getLogger(__name__)

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args)
  if n.test: return test(verbose = n.verbose)
  logging.basicConfig(format = _me + ": %(levelname)s: %(message)s",
                      level = logging.DEBUG if n.debug
                                            else logging.WARNING)
  try:
    config = load_config(n.config) if n.config else None
    if n.doc:
      url = (D.browse_man_page if n.browse else D.man_page_url)(
              n.doc, config = config)
      if url is None: return 1
      print(url); return 0
    files = n.files or ["-"]
    for name in files:
      text = _read(name)
      if n.highlight:
        sys.stdout.write(L.highlight(text, config = config))
      else:
        pre = name + " " if len(files) > 1 else ""
        start, end = n.range or (0, None)
        for s in C.classify(text, config, start, end):
          print("{}{} {} {} {}".format(pre, s.start, s.end,
                                       s.category, s.text(text)))
  except (GlslModeError, OSError) as e:
    print("{}: error: {}".format(_me, e), file = sys.stderr)
    return 2
  return 0
                                                                # }}}1

def _read(name):
  if name == "-": return sys.stdin.read()
  with open(name) as f:
    return f.read()

def _parse_range(s):                                            # {{{1
  """
  >>> _parse_range("3:10")
  (3, 10)
  >>> _parse_range("3:")
  (3, None)
  >>> try: _parse_range("x")
  ... except argparse.ArgumentTypeError as e: print(e)
  invalid range: 'x' (expected START:END)
  """

  a, sep, b = s.partition(":")
  try:
    if not sep: raise ValueError(s)
    return int(a), (int(b) if b else None)
  except ValueError:
    raise argparse.ArgumentTypeError(
      "invalid range: {!r} (expected START:END)".format(s))
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  p.add_argument("files", metavar = "FILE", nargs = "*",
                 help = "file(s) to classify (default: stdin)")
  p.add_argument("--highlight", action = "store_true",
                 help = "print highlighted source instead of spans")
  p.add_argument("--range", metavar = "START:END",
                 type = _parse_range,
                 help = "only spans overlapping this range")
  p.add_argument("--config", "-c", metavar = "FILE",
                 help = "config file with additional words")
  p.add_argument("--doc", metavar = "WORD",
                 help = "print the reference page URL of a built-in")
  p.add_argument("--browse", action = "store_true",
                 help = "open the reference page (with --doc)")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--debug", action = "store_true",
                 help = "log debug messages")
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of classifying)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "run tests verbosely")
  return p
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run doctest on all modules."""
  import doctest, importlib, pkgutil
  pkg = importlib.import_module(__package__ or "glsl_mode")
  tot_f, tot_t = 0, 0
  for x in pkgutil.iter_modules(pkg.__path__):
    m = importlib.import_module("." + x.name, pkg.__name__)
    if verbose: print("Testing module {} ...".format(x.name))
    f, t = doctest.testmod(m, verbose = verbose)
    tot_f += f; tot_t += t
    if verbose: print()
  if verbose:
    print("Summary:")
    print("{} passed and {} failed.".format(tot_t - tot_f, tot_f))
    if tot_f == 0: print("Test passed.")
    else: print("***Test Failed*** {} failures.".format(tot_f))
  return 0 if tot_f == 0 else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
