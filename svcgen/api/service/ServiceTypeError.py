"""Raised when a service accessor receives a value outside its allowed shapes."""


class ServiceTypeError(TypeError):
    """Invalid value passed to a ServiceDefinition accessor."""
