from pytest import Item, fixture

from rpn4.engine import CalculatorEngine
from rpn4.storage import FileStorage, MemoryStorage


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def storage():
    return MemoryStorage()


@fixture
def engine(storage):
    '''
    Fresh calculator, all zeroes, nothing saved yet.
    '''
    return CalculatorEngine(storage)


@fixture
def state_file(tmp_path):
    return tmp_path / 'data' / 'state.clc'


@fixture
def file_storage(state_file):
    return FileStorage(str(state_file))


@fixture
def fill(engine):
    '''
    Return function setting X, Y, Z, T by pushing T first.
    '''
    def fill(x, y, z, t):
        for value in t, z, y, x:
            engine.roll_set_x(value)
    return fill
