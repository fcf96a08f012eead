# src/logic/error_reporter.py

from src.core.models.response import ErroredAccount

class ErrorReporter:
    """
    Manages the collection and reporting of rejected accounts.
    """
    def __init__(self):
        self._errored_accounts: dict[str, ErroredAccount] = {}

    def add_error(self, account_id: str, error_reason: str):
        """
        Adds an error for a specific account. If an error for the same
        account ID already exists, the new reason is appended to it.
        """
        if account_id in self._errored_accounts:
            existing_reason = self._errored_accounts[account_id].error_reason
            if error_reason not in existing_reason: # Avoid duplicate messages
                self._errored_accounts[account_id].error_reason += f"; {error_reason}"
        else:
            self._errored_accounts[account_id] = ErroredAccount(
                account_id=account_id,
                error_reason=error_reason
            )

    def get_errors(self) -> list[ErroredAccount]:
        """
        Returns a list of all collected errored accounts.
        """
        return list(self._errored_accounts.values())

    def has_errors(self) -> bool:
        """
        Checks if any errors have been reported.
        """
        return bool(self._errored_accounts)

    def clear(self):
        """
        Clears all collected errors.
        """
        self._errored_accounts = {}
