""" Command line interface of codebase-guidelines. """
