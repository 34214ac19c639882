# app.py
import streamlit as st

from algorithms.lcs import compare_similarity, lcs_length
from algorithms.ranking import EmptyOptionsError, find_best_index, get_similarity_ratings
from utils.text_io import read_uploads, split_options

st.set_page_config(page_title="Similar String", layout="wide")
st.title("Similar String")
st.caption("LCS-based similarity: length of the longest common subsequence over the longer length.")

mode = st.radio("Mode", ["Rank candidates", "Compare two texts"], horizontal=True)

if mode == "Compare two texts":
    col_a, col_b = st.columns(2)
    left = col_a.text_area("Text A", "longest", height=160)
    right = col_b.text_area("Text B", "stone", height=160)
    if st.button("Compare"):
        c1, c2 = st.columns(2)
        c1.metric("LCS length", lcs_length(left, right))
        c2.metric("Similarity", f"{compare_similarity(left, right):.3f}")
else:
    target = st.text_input("Target", "fight")
    typed = st.text_area("Candidates (one per line)", "blight\nnight\nstride", height=160)
    files = st.file_uploader("...or upload .txt files", type=["txt"], accept_multiple_files=True)
    per_line = st.checkbox("Split uploaded files into one candidate per line", value=False)

    if st.button("Rank"):
        pairs = [(line, "typed") for line in split_options(typed)]
        pairs += read_uploads(files, per_line=per_line)
        options = [text for text, _ in pairs]
        labels = [source for _, source in pairs]

        try:
            i, score = find_best_index(target, options)
        except EmptyOptionsError:
            st.warning("Add at least one candidate.")
            st.stop()

        st.success(f"Best match: {options[i]!r} ({labels[i]}) with score {score:.3f}")
        ratings = get_similarity_ratings(target, options)
        st.dataframe(
            [
                {"#": n, "candidate": opt[:120], "source": src, "similarity": round(r, 4)}
                for n, (opt, src, r) in enumerate(zip(options, labels, ratings))
            ],
            width="stretch",
        )
