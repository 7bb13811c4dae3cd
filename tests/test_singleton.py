import threading

from designpatterns.singleton import Singleton, get_instance

PAR_COUNT = 100


def test_singleton():
    ins1 = get_instance()
    ins2 = get_instance()
    assert ins1 is ins2
    assert isinstance(ins1, Singleton)


def test_parallel_singleton():
    instances = [None] * PAR_COUNT

    def fetch(index):
        instances[index] = get_instance()

    threads = [threading.Thread(target=fetch, args=(i,)) for i in range(PAR_COUNT)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert {id(instance) for instance in instances} == {id(get_instance())}