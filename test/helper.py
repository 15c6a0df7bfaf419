class Record:
    def __init__(self, stream):
        self.footprint = []
        self.derived = stream.when(self.on_value, self.on_error,
                                   self.on_complete)

    def on_value(self, value):
        self.footprint.append(('value', value))
        return value

    def on_error(self, error):
        self.footprint.append(('error', error))

    def on_complete(self):
        self.footprint.append(('complete', ))

    @property
    def values(self):
        return [e[1] for e in self.footprint if e[0] == 'value']


def record(s):
    return Record(s)


class Emitter:
    ''' keep the emit functions handed to a producer '''

    def __call__(self, value, error, complete):
        self.value = value
        self.error = error
        self.complete = complete
