from .vector import Vector


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return min(upper, max(lower, value))


def reflect(direction: Vector, normal: Vector) -> Vector:
    # mirror `direction` about the plane with unit `normal`
    # REF: [de Greve, 2006, Reflections and Refractions in Ray Tracing]
    return direction - normal * (2 * direction.dot(normal))
