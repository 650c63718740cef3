"""Parameter ordering for discovery methods.

This module provides the ParameterProcessor class that turns the parameter
mapping of a discovery method into the ordered parameter list of the
generated Java member.
"""

from gce2retrofit.discovery import Method, ParameterType
from gce2retrofit.exceptions import MissingParameterError

__all__ = ['ParameterProcessor']


class ParameterProcessor:
    """Orders the parameters of a method.

    Parameters named in ``parameterOrder`` come first, in that order. The
    remaining declared parameters follow in document order.

    Example:
        >>> processor = ParameterProcessor()
        >>> [name for name, _ in processor.order(method)]
        ['project', 'zone', 'pageToken']
    """

    def order(self, method: Method) -> list[tuple[str, ParameterType]]:
        """Return the ordered ``(name, parameter)`` pairs of a method.

        Args:
            method: The method whose parameters are ordered.

        Returns:
            The ordered parameters; empty when the method declares none.

        Raises:
            MissingParameterError: If parameterOrder names a parameter the
                method does not declare.
        """
        parameters = method.parameters
        ordered: list[tuple[str, ParameterType]] = []
        seen: set[str] = set()

        for name in method.parameter_order or []:
            if name not in parameters:
                raise MissingParameterError(name, method=method.name)
            if name in seen:
                continue
            seen.add(name)
            ordered.append((name, parameters[name]))

        ordered.extend(
            (name, parameter)
            for name, parameter in parameters.items()
            if name not in seen
        )
        return ordered
