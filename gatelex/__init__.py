"""Lexer for logic gate expressions over numbered terminals."""

version = '0.1.0'
