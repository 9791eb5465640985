from hanoi.backend.engine.flow.controller import FlowController, Screen, Surface

__all__ = ["FlowController", "Screen", "Surface"]
