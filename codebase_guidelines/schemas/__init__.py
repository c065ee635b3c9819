""" Data models of codebase-guidelines. """
