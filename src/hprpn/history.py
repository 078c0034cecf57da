from collections import deque, namedtuple


OPERATION = 'operation'
STACK_OPERATION = 'stack_operation'

# Snapshot of the machine taken right before a mutating action.
HistoryItem = namedtuple('HistoryItem',
                         ['kind', 'stack_before', 'input_before', 'operation'])


class History:
    '''
    Bounded undo log. Newest snapshot last.

    Once full, saving a snapshot evicts the oldest one.
    '''

    DEFAULT_LIMIT = 50

    def __init__(self, limit=None):
        if limit is None:
            limit = type(self).DEFAULT_LIMIT
        self.limit = limit
        self.items = deque(maxlen=self.limit)

    def save(self, kind, stack, current_input, operation=None):
        '''
        Append a snapshot of stack and current_input.

        The stack is copied, so later mutation can't reach into history.
        '''
        item = HistoryItem(kind, tuple(stack), current_input, operation)
        self.items.append(item)
        return item

    def pop(self):
        '''
        Remove and return newest snapshot, None if there is none.
        '''
        if not self.items:
            return None
        return self.items.pop()

    def clear(self):
        self.items.clear()

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]
