"""Agar core

Result schemas, recognizer configuration and the checking pipeline that ties
the lexer and the recognizer together.
"""
