from app.presentation.middleware.correlation import CorrelationIDMiddleware

__all__ = ["CorrelationIDMiddleware"]
