class Queue:
    """Operations every priority queue in this project provides."""

    def insert(self, data):
        raise NotImplementedError

    def extract_min(self, default=None):
        raise NotImplementedError

    def peek(self, default=None):
        raise NotImplementedError

    def size(self):
        raise NotImplementedError

    def is_empty(self):
        return self.size() == 0
