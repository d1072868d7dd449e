from pytest import Item, fixture

from chaincalc.engine import Engine


@fixture
def engine():
    return Engine()


@fixture
def press(engine):
    '''
    Press keys on a fresh engine, returning the display.

    Keys are as the engine takes them: '5', '+', '+/-', 'AC', etc.
    '''
    def press(*keys):
        for key in keys:
            engine.feed(key)
        return engine.display_value
    return press


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Use with pytest -rP, and
    enable_assertion_pass_hook set.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
