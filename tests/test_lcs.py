from algorithms.lcs import compare_similarity, lcs_length

def test_lcs_length():
    assert lcs_length("longest", "stone") == 3
    assert lcs_length("stone", "longest") == 3
    assert lcs_length("abcde", "ace") == 3
    assert lcs_length("", "abc") == 0
    assert lcs_length("abc", "") == 0
    assert lcs_length("", "") == 0
    assert lcs_length("abc", "xyz") == 0

def test_lcs_bounded_by_shorter():
    pairs = [("kitten", "sitting"), ("aaaa", "aa"), ("night", "fight"), ("x", "xxxxx")]
    for a, b in pairs:
        assert lcs_length(a, b) <= min(len(a), len(b))
    assert lcs_length("aaaa", "aa") == 2

def test_lcs_counts_characters_not_bytes():
    assert lcs_length("héllo", "hello") == 4
    assert lcs_length("日本語", "日本") == 2
    assert compare_similarity("日本語", "日本") == 2 / 3

def test_lcs_similarity():
    assert abs(compare_similarity("abcde", "ace") - 3/5) < 1e-6
    assert compare_similarity("", "abc") == 0.0
    assert compare_similarity("age", "page") == 0.75

def test_identity():
    for s in ["hello", "a", "longest", "ünïcødé"]:
        assert compare_similarity(s, s) == 1.0

def test_empty_pair_is_identical():
    assert compare_similarity("", "") == 1.0

def test_symmetry_and_bounds():
    words = ["longest", "stone", "", "fight", "night", "aaa", "abcabc"]
    for a in words:
        for b in words:
            s = compare_similarity(a, b)
            assert s == compare_similarity(b, a)
            assert 0.0 <= s <= 1.0

def test_no_common_characters():
    assert compare_similarity("abc", "xyz") == 0.0
