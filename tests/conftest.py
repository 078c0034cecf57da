from pytest import Item, fixture

from hprpn.machine import Machine


@fixture
def machine():
    return Machine()


def key(machine, *keys):
    '''
    Press keys given by name: digits, '.', operators or command names.
    '''
    for name in keys:
        if name in Machine.OPERATORS:
            machine.perform_operation(name)
        elif name in Machine.COMMANDS:
            Machine.COMMANDS[name](machine)
        elif name == '.':
            machine.input_decimal()
        else:
            for digit in name:
                machine.input_digit(digit)


@fixture
def press(machine):
    return lambda *keys: key(machine, *keys)


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Only called with enable_assertion_pass_hook. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
