# -*- coding: utf-8 -*-


class InvalidArgument(TypeError, ValueError):
    """Raised when an operator is given an argument of the wrong kind, a
    non-numeric size, a transform that isn't callable, a group size below one,
    and the like

    These are programmer errors, so they are raised right away and never
    caught by the library. This extends both TypeError and ValueError so
    callers can check for either"""
    def __init__(self, operator, message):
        """
        :param operator: str, the name of the operator that failed (eg, "map")
        :param message: str, what was wrong with the argument
        """
        self.operator = operator
        super().__init__(f"Table.{operator}(): {message}")
