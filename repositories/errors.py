class DirectoryError(Exception):
    message = 'Employee search failed.'

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class SearchTransportError(DirectoryError):
    message = (
        'Unable to connect to the employee directory. '
        'Check your network or the webhook deployment access settings.'
    )


class SearchParseError(DirectoryError):
    message = 'Received invalid data from the employee directory. Ensure the webhook is deployed to return JSON.'


class SearchServiceError(DirectoryError):
    def __init__(self, service_message: str | None = None) -> None:
        self.service_message = service_message
        super().__init__(f'Directory service error: {service_message or "Unknown error"}')


class SubmissionError(Exception):
    message = 'Failed to submit the form. Please try again.'

    def __init__(self) -> None:
        super().__init__(self.message)


class SubmitTransportError(SubmissionError):
    pass
