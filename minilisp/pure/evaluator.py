"""Tree-walking evaluator for minilisp.

`evaluate` is a plain recursive function of (expression, environment): there is no interpreter object and no state
outside the Environment chain. Special forms are recognized by the symbol at the head of a list, in this order:

```
(quote EXP)              ; EXP, unevaluated
(if TEST CONSEQ ALT)     ; CONSEQ if TEST is truthy, else ALT
(define NAME EXP)        ; binds NAME in the current frame
(set! NAME EXP)          ; rebinds NAME in whichever frame already binds it
(lambda (PARAMS) BODY)   ; closure over the current frame
```

Every other non-trivial list is a procedure application. Recursion in minilisp is recursion in Python, so deep
recursion ends in a RecursionError (reported by ErrorHandler).
"""

from minilisp.lang.error import ArityMismatch, InvalidForm, NotAProcedure
from minilisp.pure.environment import Environment
from minilisp.pure.lexical import Expression, List, Number, Symbol

SPECIAL_FORMS = {"quote": 1, "if": 3, "define": 2, "set!": 2, "lambda": 2}  # name: operand count


class Procedure(Expression):
    """User-defined procedure: parameter names, one body expression and the Environment it was defined in."""

    def __init__(self, params, body, env):
        self.params = params
        self.body = body
        self.env = env

    def __call__(self, *args):
        return evaluate(self.body, Environment(self.params, args, self.env))

    def display(self):
        return f"(lambda ({' '.join(self.params)}) {self.body.display()})"

    def __repr__(self):
        return f"Procedure({self.params!r}, {self.body!r})"


class Primitive(Expression):
    """Native procedure with a fixed argument count, bound in the root Environment."""

    def __init__(self, name, fn, arity=2):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, *args):
        if len(args) != self.arity:
            raise ArityMismatch(self.name, self.arity, len(args))
        return self.fn(*args)

    def display(self):
        return f"<builtin:{self.name}>"

    def __repr__(self):
        return f"Primitive('{self.name}')"


def is_truthy(value):
    """Zero and the empty list are false, everything else is true."""
    if isinstance(value, Number):
        return value.value != 0
    if isinstance(value, List):
        return len(value) > 0
    return True


def _name(expr, form):
    if not isinstance(expr, Symbol):
        raise InvalidForm(form.display(), f"'{expr.display()}' is not a symbol")
    return expr.name


def _eval_special(head, expr, env):
    """Evaluates special form expr, whose head symbol head is a key of SPECIAL_FORMS."""
    operands = expr[1:]
    if len(operands) != SPECIAL_FORMS[head]:
        raise ArityMismatch(head, SPECIAL_FORMS[head], len(operands))

    if head == "quote":
        return operands[0]

    elif head == "if":
        test, conseq, alt = operands
        return evaluate(conseq if is_truthy(evaluate(test, env)) else alt, env)

    elif head == "define":
        name, value = operands
        env.define(_name(name, expr), evaluate(value, env))
        return None

    elif head == "set!":
        name, value = operands
        name = _name(name, expr)
        value = evaluate(value, env)
        env.assign(name, value)
        return None

    params, body = operands
    if not isinstance(params, List):
        raise InvalidForm(expr.display(), "lambda parameters must be a list")
    return Procedure([_name(param, expr) for param in params], body, env)


def evaluate(expr, env):
    """Evaluates expr in env and returns its value (None for define and set!)."""
    if isinstance(expr, Symbol):
        return env.lookup(expr.name)

    elif not isinstance(expr, List):
        return expr  # numbers and procedures evaluate to themselves

    elif len(expr) == 0:
        return expr

    elif len(expr) == 1:
        return evaluate(expr[0], env)  # a lone element is a reference, never a call

    head = expr[0]
    if isinstance(head, Symbol) and head.name in SPECIAL_FORMS:
        return _eval_special(head.name, expr, env)

    proc = evaluate(head, env)
    if not isinstance(proc, (Procedure, Primitive)):
        raise NotAProcedure(head.display())

    args = [evaluate(arg, env) for arg in expr[1:]]
    return proc(*args)
