# --                                                            ; {{{1
#
# File        : glsl_mode/doc.py
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
Reference page lookup for built-in functions.

>>> man_page_url("clamp")
'https://registry.khronos.org/OpenGL-Refpages/gl4/html/clamp.xhtml'
>>> man_page_url("texture2D")
'https://registry.khronos.org/OpenGL-Refpages/gl4/html/texture2D.xhtml'
>>> man_page_url("vec4") is None
True
"""                                                             # }}}1

import logging, sys, webbrowser

from .classify import Classifier, default_classifier
from .data import Category

log = logging.getLogger(__name__)

DOC_CATEGORIES = (Category.BUILTIN, Category.DEPRECATED_BUILTIN)

def man_page_url(word, classifier = None, config = None):       # {{{1
  """
  URL of the reference page for a built-in function, None for other
  words.

  >>> from .config import Config
  >>> cfg = Config({ "builtin": "myNoise" },
  ...              man_pages_base_url = "http://localhost/man/",
  ...              man_pages_suffix = ".html")
  >>> man_page_url("myNoise", config = cfg)
  'http://localhost/man/myNoise.html'
  >>> man_page_url("myNoise") is None
  True
  """

  if classifier is None:
    classifier = default_classifier() if config is None \
                 else Classifier(config)
  if classifier.classify_word(word) not in DOC_CATEGORIES:
    return None
  c = classifier.config
  return c.man_pages_base_url + word + c.man_pages_suffix
                                                                # }}}1

def browse_man_page(word, classifier = None, config = None):
  """Open the reference page in a browser; returns the URL or None."""
  url = man_page_url(word, classifier, config)
  if url is None:
    log.info("no reference page for %r", word)
  else:
    webbrowser.open(url)
  return url

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
