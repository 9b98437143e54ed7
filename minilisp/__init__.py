"""minilisp: a minimal Lisp interpreter.

Basic program flow:
    1. Reader: splits a line into tokens and recursively reads them into an expression tree
        - see minilisp/pure/lexical.py for the grammar
    2. Evaluation: walks the tree against a chain of Environments, handling the special forms (quote, if, define,
       set!, lambda) and applying procedures
        - see minilisp/pure/evaluator.py and minilisp/pure/environment.py
    3. Driver: a Session owns the root Environment (+ - * /) and feeds it lines from a file or from the Shell

"""
