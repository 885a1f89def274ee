#! /usr/bin/env python
"""Run the fixed StringFinder scenarios and report success"""
from stringfinder import StringFinder

SENTENCE = "Zack Berger is a student at University of California"
NOISE = "mv0t9q3mytx1789mychqp3u,x9349u0qtx4u3hhqmq8qt h80t h h0h   0t qh7 0ht00 aaaa"

SCENARIOS = [
    # text, initial pattern, expected, [(new pattern, expected), ...]
    ("", "", -1, [("hello",-1)]),
    ("1", "", -1, [("1",0),("Not here",-1)]),
    (SENTENCE, "Zack", 0, [
        ("k Berger",3),
        ("is a stud",12),
        ("student at",17),
        ("ia",50),
        ("???",-1),
        ("Student",-1),
    ]),
    (NOISE, "aaaa", 72, [("mv",0),(",x9349",23)]),
]

def main():
    for text,pattern,expected,patterns in SCENARIOS:
        finder = StringFinder( text, pattern )
        result = finder.search()
        assert result == expected, (text,pattern,result)
        for new_pattern,expected in patterns:
            result = finder.search( new_pattern )
            assert result == expected, (text,new_pattern,result)
    print( "All tests passed!" )

if __name__ == "__main__":
    main()
