# --                                                            ; {{{1
#
# File        : glsl_mode/__init__.py
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
GLSL syntax classification for editors.

The classifier is in glsl_mode.classify, the category tables in
glsl_mode.tables, configuration (additional words) in
glsl_mode.config, and the pygments lexer in glsl_mode.lexer.
"""                                                             # }}}1

__version__ = "0.1.0"

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
