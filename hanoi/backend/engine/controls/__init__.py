from hanoi.backend.engine.controls.classifier import classify

__all__ = ["classify"]
