"""Transaction management for property store writes."""


class TransactionContext:
    """
    Context manager for database transactions.

    Commits when the block completes and rolls back when it raises.
    The exception is always re-raised.

    Usage:
        with TransactionContext(session):
            session.add(first)
            session.add(second)
            # Both commit together or rollback together
    """

    def __init__(self, session):
        """
        Initialize transaction context.

        Args:
            session: SQLAlchemy session
        """
        self._session = session

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit transaction context with commit or rollback."""
        if exc_type is not None:
            self._session.rollback()
            return False

        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return False
