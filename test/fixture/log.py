import contextlib

from loguru import logger


class LogCapture:

    @classmethod
    @contextlib.contextmanager
    def caplog(cls, *args, **kwargs):
        log_capture = cls(*args, **kwargs)

        try:
            yield log_capture
        finally:
            log_capture.detach()

    def __init__(self, name='nestconf', level='DEBUG'):
        self.capture = []
        self.name = name

        logger.enable(name)
        self.handler_id = logger.add(self.capture.append, level=level, format='{message}')

    def detach(self):
        logger.remove(self.handler_id)
        logger.disable(self.name)

    def __len__(self):
        return len(self.capture)

    def __iter__(self):
        yield from self.capture

    @property
    def records(self):
        return [message.record for message in self.capture]

    def message_contains(self, text):
        return any(text in message for message in self.capture)

    def message_equals(self, text):
        return any(text == message.rstrip('\n') for message in self.capture)
