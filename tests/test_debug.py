from pyhashtable.chain import Chain
from pyhashtable.debug import print_table, render_buckets
from pyhashtable.table import Table


def test_render_buckets():
    assert render_buckets([]) == ""
    assert render_buckets([Chain(), Chain()]) == "0: \n1: \n"

    chain = Chain()
    chain.append("madmax", 833)
    chain.append("leon", 886)
    assert render_buckets([Chain(), chain]) == "0: \n1: madmax=833 -> leon=886\n"


def test_print_table(capsys):
    t = Table(2)
    t.put(4, "four")
    print_table(t, "small")

    captured = capsys.readouterr()
    assert captured.out == "== small ==\n0: 4=four\n1: \n"
