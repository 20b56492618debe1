'''
Command line tests
'''

from rpn4 import cli
from rpn4.cli import CLI
from rpn4.lexer import CommandLexer

from pytest import fixture, raises


@fixture
def run(state_file, capfd):
    '''
    Run CLI on expressions against the test state file; return stdout lines
    and stderr.
    '''
    def run(*expressions, options=()):
        CLI().run(args=['-f', str(state_file), *options,
                        '-e', *expressions])
        out, err = capfd.readouterr()
        return out.splitlines(), err
    return run


def test_add(run, state_file):
    out, err = run('3 4 +')
    assert out == ['0.0', '0.0', '0.0', '7.0', '']
    assert err == ''
    assert state_file.read_text() == '7.0;0.0;0.0;0.0;;;;;;;;;'


def test_operator_enters_pending_number(run):
    out, _ = run('2 3^')
    assert out[3] == '8.0'


def test_comma_sign_and_aliases(run):
    out, _ = run('1,5_ 2 *')
    assert out[3] == '-3.0'


def test_unicode_keys(run):
    out, _ = run('9 √x 2 ÷')
    assert out[3] == '1.5'


def test_line_per_stack(run):
    out, _ = run('1', '2', 'pi')
    assert len(out) == 15
    assert out[10:14] == ['0.0', '1.0', '2.0', '3.141592653589793']


def test_store_recall(run, state_file):
    out, err = run('5 >A <A + vars')
    assert out[:9] == ['5.0', '', '', '', '', '', '', '', 'A']
    assert out[9:13] == ['0.0', '0.0', '0.0', '10.0']
    assert state_file.read_text() == '10.0;0.0;0.0;0.0;5.0;;;;;;;;'


def test_state_carries_over(run):
    run('1 2 3 4 >H')
    out, _ = run('drop drop <H')
    assert out[:4] == ['1.0', '1.0', '2.0', '4.0']


def test_roll(run):
    out, _ = run('1 2 3 4 roll')
    assert out[:4] == ['2.0', '3.0', '4.0', '1.0']


def test_recall_unset(run):
    out, err = run('1 <B 2')
    assert 'Variable B is not set' in err
    # Rest of line is skipped
    assert out[3] == '1.0'


def test_bad_entry(run):
    out, err = run('_ +')
    assert "Couldn't parse '-'" in err
    assert out[4] == '-'


def test_unknown_command(run):
    _, err = run('frobnicate')
    assert 'Unknown command frobnicate' in err


def test_unlexable(run):
    out, err = run('1 @ 2')
    assert "Couldn't lex @ 2" in err
    assert out[3] == '1.0'


def test_no_save(run, state_file):
    run('1', options=['--no-save'])
    assert not state_file.exists()


def test_corrupt_state_file(run, state_file, capfd):
    state_file.parent.mkdir()
    state_file.write_text('not a record')
    with raises(SystemExit) as info:
        run('1')
    assert info.value.code == 2
    assert 'Expected 12 fields' in capfd.readouterr().err


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    assert capsys.readouterr().out.strip() == CommandLexer.LEXEME


def test_clear_is_not_a_command(run):
    out, err = run('1 2 3 clear')
    assert 'Unknown command clear' in err
    assert out[:4] == ['0.0', '1.0', '2.0', '3.0']


class InterruptedInput:
    '''
    Interactive session where the user types one line, then hits ^C.
    '''
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt

    def __iter__(self):
        yield '1 2'
        raise KeyboardInterrupt


def test_interrupt_saves(state_file, capfd, monkeypatch):
    monkeypatch.setattr(cli, 'InteractiveInput', InterruptedInput)
    with raises(SystemExit) as info:
        CLI().run(args=['-f', str(state_file), '-p'])
    assert info.value.code == 1
    assert state_file.read_text() == '2.0;1.0;0.0;0.0;;;;;;;;;'


def test_interrupt_no_save(state_file, capfd, monkeypatch):
    monkeypatch.setattr(cli, 'InteractiveInput', InterruptedInput)
    with raises(SystemExit):
        CLI().run(args=['-f', str(state_file), '--no-save', '-p'])
    assert not state_file.exists()
