"""
Mastermind for the terminal: guess 4 different colors out of 8 in 10 tries.
"""

__version__ = "0.1.0"
__author__ = "Qiang Guo"
__email__ = "bigdragonsoft@gmail.com"
__url__ = "https://github.com/bigdragonsoft/mastermind"
