from designpatterns.observer import Observer, Reader, Subject


def test_observer_example(capsys):
    subject = Subject()
    for name in ("reader1", "reader2", "reader3"):
        subject.attach(Reader(name))
    subject.update_context("observer mode")
    assert capsys.readouterr().out == (
        "reader1 receive observer mode\n"
        "reader2 receive observer mode\n"
        "reader3 receive observer mode\n"
    )


def test_context_is_updated():
    subject = Subject()
    subject.update_context("news")
    assert subject.context == "news"


class _Recorder(Observer):
    def __init__(self):
        self.seen = []

    def update(self, subject):
        self.seen.append(subject.context)


def test_every_update_is_delivered():
    subject = Subject()
    recorder = _Recorder()
    subject.attach(recorder)
    subject.update_context("a")
    subject.update_context("b")
    assert recorder.seen == ["a", "b"]


def test_no_observers_prints_nothing(capsys):
    Subject().update_context("quiet")
    assert capsys.readouterr().out == ""