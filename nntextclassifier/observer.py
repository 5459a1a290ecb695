import logging


class Observer:
    """Receives progress messages."""
    def update(self, text):
        raise NotImplementedError


class Observable:
    """
    Keeps an explicit list of observers and notifies them synchronously,
    in registration order, on the caller's thread.
    """
    def __init__(self):
        self._observers = []

    def add_observer(self, observer):
        self._observers.append(observer)

    def remove_observer(self, observer):
        self._observers.remove(observer)

    def notify_observers(self, text):
        for observer in list(self._observers):
            observer.update(text)


class LoggingObserver(Observer):
    """Forwards progress messages to a logger."""
    def __init__(self, name="nntextclassifier.progress", level=logging.INFO):
        self.logger = logging.getLogger(name)
        self.level = level

    def update(self, text):
        self.logger.log(self.level, text)


class MessageCollector(Observer):
    """Keeps every message it receives. Handy for tests and batch jobs."""
    def __init__(self):
        self.messages = []

    def update(self, text):
        self.messages.append(text)
