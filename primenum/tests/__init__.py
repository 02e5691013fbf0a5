# coding: utf-8
"""
Shared test helpers: random CNF generation and brute-force model checking.
"""
