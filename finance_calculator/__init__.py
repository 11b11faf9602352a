"""Finance calculator - annuity loans, deposits and currency conversion"""

__version__ = "0.1.0"
