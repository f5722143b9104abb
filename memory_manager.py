class FrameTable:
    def __init__(self, wss):
        assert wss >= 1, f"working set size must be positive, got {wss}"
        self.wss = wss
        # Each slot stores a resident page number or None if empty
        self.slots = [None] * wss

    def find_free_slot(self):
        for i, page in enumerate(self.slots):
            if page is None:
                return i
        return None

    def find_page(self, page):
        # Last match wins; duplicates can only come from the LRU warm-up
        found = None
        for i, resident in enumerate(self.slots):
            if resident == page:
                found = i
        return found

    def install(self, slot, page):
        self.slots[slot] = page

    def get_page(self, slot):
        return self.slots[slot]

    def is_empty(self, slot):
        return self.slots[slot] is None

    def is_full(self):
        return self.find_free_slot() is None

    def move_to_back(self, slot):
        page = self.slots.pop(slot)
        self.slots.append(page)

    def shift_in(self, page):
        """Drop the front slot, shift the rest forward and append page at the back."""
        evicted = self.slots.pop(0)
        self.slots.append(page)
        return evicted

    def resident_count(self):
        return sum(1 for page in self.slots if page is not None)

    def __len__(self):
        return self.wss

    def __repr__(self):
        return f"FrameTable({self.slots})"


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.hits = 0
        self.fills = 0
        self.dropped = 0

    def record_page_fault(self):
        self.page_faults += 1

    def record_hit(self):
        self.hits += 1

    def record_fill(self):
        # Installing into an empty slot is not a fault
        self.fills += 1

    def record_drop(self):
        self.dropped += 1

    @property
    def references(self):
        return self.page_faults + self.hits + self.fills + self.dropped

    def __str__(self):
        return (f"Page Faults: {self.page_faults}\n"
                f"Hits: {self.hits}\n"
                f"Fills: {self.fills}\n"
                f"Dropped: {self.dropped}")
