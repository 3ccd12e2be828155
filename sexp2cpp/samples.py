from __future__ import annotations

SAMPLE_PROGRAM = """
    (class A(public(init int a) (= a 1)))
    (fn main()
        (init double b)
        (= b 2.5)
        )



    )"""
