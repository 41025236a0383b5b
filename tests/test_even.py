import pytest

from gopractice.even import even, main, odd


def test_even():
    assert even(2)


@pytest.mark.parametrize("i", [0, 2, 4, 100, -6])
def test_even_values(i):
    assert even(i)
    assert not odd(i)


@pytest.mark.parametrize("i", [1, 3, 5, 99, -7])
def test_odd_values(i):
    assert odd(i)
    assert not even(i)


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Is 5 even? false\n"


def test_main_with_argument(capsys):
    main(["2"])
    assert capsys.readouterr().out == "Is 2 even? true\n"