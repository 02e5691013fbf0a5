# coding: utf-8
"""Boolean-level reasoning: SAT oracles and implicant enumeration."""
