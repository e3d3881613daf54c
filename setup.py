from setuptools import setup, find_packages
import glsl_mode

setup(
  name              = "glsl-mode",
  description       = "GLSL syntax classification & highlighting",
  version           = glsl_mode.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Filters",
  ],
  keywords          = "glsl shader syntax highlighting pygments",
  packages          = find_packages(exclude = ["tests"]),
  entry_points      = {
    "console_scripts" : ["glsl-mode=glsl_mode.__main__:main_"],
    "pygments.lexers" : ["glsl_mode=glsl_mode.lexer:GlslModeLexer"],
    "pygments.styles" : ["glsl_mode=glsl_mode.lexer:GlslModeStyle"],
  },
  python_requires   = ">=3.6",
  install_requires  = ["regex", "pyparsing>=3.0", "pygments>=2.5"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
