"""
Fixit rule for loops that poll Cursor.can_continue().
"""


import libcst as cst
from fixit import Invalid, LintRule, Valid
from libcst.helpers import get_full_name_for_node


class CanContinueLoopRule(LintRule):
    """
    can_continue() only reports whether the source is non-empty. A loop
    guarded by it never ends for a repeating cursor, and keeps spinning on
    end results for a stop_at_end cursor whose predicate rejects the rest of
    the source. Loop on the results of next() instead.
    """

    MESSAGE = "Loop on the result of next() instead of polling can_continue()"

    VALID = [
        Valid(
            """
            while True:
                result = cursor.next()
                if is_end(result):
                    break
                handle(result.value)
            """
        ),
        Valid(
            """
            if cursor.can_continue():
                first = cursor.next()
            """
        ),
        Valid(
            """
            for value in cursor:
                handle(value)
            """
        ),
    ]

    INVALID = [
        Invalid(
            """
            while cursor.can_continue():
                handle(cursor.next())
            """
        ),
        Invalid(
            """
            def f(self):
                while self.cursor.can_continue():
                    self.handle(self.cursor.next())
            """
        ),
        Invalid(
            """
            while can_continue():
                pass
            """
        ),
    ]

    def visit_While(self, node: cst.While) -> None:
        test = node.test
        if not isinstance(test, cst.Call):
            return
        full_name = get_full_name_for_node(test.func)
        if full_name is None:
            return
        if full_name.split(".")[-1] == "can_continue":
            self.report(test)
