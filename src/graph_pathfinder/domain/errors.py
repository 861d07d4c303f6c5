# domain/errors.py


class PathfindingError(ValueError):
    """Caller supplied input the engines refuse to search."""


class InvalidEndpointError(PathfindingError):
    def __init__(self, role: str, vid: int):
        super().__init__(f"{role} vertex {vid} is not in the vertex set")
        self.role, self.vertex_id = role, vid


class InvalidGraphError(PathfindingError):
    pass
