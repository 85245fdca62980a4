"""Agar Language Module

This module provides the lexer and the recursive-descent recognizer for the
Agar statement language.
"""
