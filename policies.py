from memory_manager import FrameTable, Statistics


class ReplacementPolicy:
    name = None

    def __init__(self, wss):
        self.frames = FrameTable(wss)
        self.stats = Statistics()

    @property
    def wss(self):
        return self.frames.wss

    def access(self, page):
        """Reference page; return True if the reference was charged as a page fault."""
        raise NotImplementedError

    @classmethod
    def run(cls, wss, trace, **kwargs):
        policy = cls(wss, **kwargs)
        for page in trace:
            policy.access(page)
        return policy.stats.page_faults


class LRUPolicy(ReplacementPolicy):
    """
    Least recently used. The slot order is the recency order: the front slot
    holds the least recently used page and the back slot the most recent one.

    Until the table is full for the first time, references go straight into
    the next empty slot without a hit check.
    """
    name = 'LRU'

    def __init__(self, wss):
        super().__init__(wss)
        self.warming_up = True

    def access(self, page):
        if self.warming_up:
            slot = self.frames.find_free_slot()
            self.frames.install(slot, page)
            self.stats.record_fill()
            if self.frames.is_full():
                self.warming_up = False
            return False

        slot = self.frames.find_page(page)
        if slot is not None:
            self.frames.move_to_back(slot)
            self.stats.record_hit()
            return False

        self.frames.shift_in(page)
        self.stats.record_page_fault()
        return True


class FIFOPolicy(ReplacementPolicy):
    """
    First in, first out through a circular replacement cursor.

    Only the page under the cursor is compared with the reference; a resident
    page anywhere else in the table is not recognized as a hit.
    """
    name = 'FIFO'

    def __init__(self, wss):
        super().__init__(wss)
        self.pointer = 0

    def advance(self):
        self.pointer = (self.pointer + 1) % self.wss

    def access(self, page):
        if self.frames.is_empty(self.pointer):
            self.frames.install(self.pointer, page)
            self.advance()
            self.stats.record_fill()
            return False

        if self.frames.get_page(self.pointer) == page:
            self.stats.record_hit()
            return False

        self.frames.install(self.pointer, page)
        self.advance()
        self.stats.record_page_fault()
        return True


class ClockPolicy(ReplacementPolicy):
    """
    Second chance. A circular cursor walks the table clearing use bits until
    it finds an empty slot, the referenced page, or a page whose use bit is
    already clear (the victim).

    With drop_after_circuit the walk stops after wss inspections, so a miss
    that arrives while every use bit is set is neither installed nor charged.
    """
    name = 'Clock'

    def __init__(self, wss, drop_after_circuit=False):
        super().__init__(wss)
        self.use_bits = [0] * wss
        self.pointer = 0
        self.drop_after_circuit = drop_after_circuit

    def advance(self):
        self.pointer = (self.pointer + 1) % self.wss

    def access(self, page):
        # One circuit clears every use bit, so wss + 1 inspections always settle
        inspections = self.wss if self.drop_after_circuit else self.wss + 1

        for _ in range(inspections):
            if self.frames.is_empty(self.pointer):
                self.frames.install(self.pointer, page)
                self.use_bits[self.pointer] = 1
                self.advance()
                self.stats.record_fill()
                return False
            elif self.frames.get_page(self.pointer) == page:
                self.use_bits[self.pointer] = 1
                self.stats.record_hit()
                return False
            elif self.use_bits[self.pointer] == 1:
                self.use_bits[self.pointer] = 0
                self.advance()
            else:
                self.frames.install(self.pointer, page)
                self.use_bits[self.pointer] = 1
                self.advance()
                self.stats.record_page_fault()
                return True

        self.stats.record_drop()
        return False


POLICIES = {
    'LRU': LRUPolicy,
    'FIFO': FIFOPolicy,
    'Clock': ClockPolicy,
}
