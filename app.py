import logging
import streamlit as st

from plagiarism_tracer import config
from plagiarism_tracer.core.detector import PlagiarismDetector
from plagiarism_tracer.core.models import SimilarityLevel
from plagiarism_tracer.core.normalizer import extract_words, word_count
from plagiarism_tracer.core.rolling_hash import BASE, PRIME
from plagiarism_tracer.core.validation import ParameterValidator, ValidationError, handle_exceptions
from plagiarism_tracer.core.window_matcher import PARTIAL_MATCH_RATIO
from plagiarism_tracer.core.logging_config import setup_logging
from plagiarism_tracer.utils.report import (
    highlight_html, matches_frame, segments_frame, summary_frame, trace_frame
)
from plagiarism_tracer.utils.samples import load_sample_texts

# Configure production logging
setup_logging(
    log_level=config.LOG_LEVEL,
    log_dir=config.LOG_DIR,
    structured_logging=config.STRUCTURED_LOGGING,
    enable_console=True,
    enable_file=config.LOG_TO_FILE
)

logger = logging.getLogger(__name__)

LEVEL_STYLES = {
    SimilarityLevel.HIGH: ("high-similarity", "#dc2626"),
    SimilarityLevel.MEDIUM: ("medium-similarity", "#d97706"),
    SimilarityLevel.LOW: ("low-similarity", "#16a34a"),
}


def initialize_session_state():
    """Initialize session state variables."""
    if "source_text" not in st.session_state:
        st.session_state.source_text = ""
    if "suspect_text" not in st.session_state:
        st.session_state.suspect_text = ""
    if "analysis_result" not in st.session_state:
        st.session_state.analysis_result = None


def initialize_app():
    """Setup the Streamlit app configuration and styling."""
    st.set_page_config(
        page_title="🔍 Plagiarism Tracer",
        page_icon="🔍",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    initialize_session_state()

    st.markdown("""
    <style>
    .main-header {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        padding: 2rem;
        border-radius: 16px;
        text-align: center;
        color: #ffffff;
        margin-bottom: 1.5rem;
    }
    .metric-card {
        background: #ffffff;
        border-radius: 12px;
        padding: 1rem 1.25rem;
        box-shadow: 0 4px 12px rgba(0,0,0,0.08);
        text-align: center;
    }
    .metric-card h3 { margin: 0; font-size: 1.8rem; }
    .metric-card p { margin: 0.25rem 0 0 0; color: #4a5568; }
    .heatmap {
        line-height: 2.1;
        font-size: 1.05rem;
        background: #f8fafc;
        border-radius: 12px;
        padding: 1rem;
    }
    </style>
    """, unsafe_allow_html=True)

    st.markdown("""
    <div class="main-header">
        <h1>Plagiarism Detection Made Transparent</h1>
        <p>Windowed Rabin-Karp matching with rolling hashes and collision checks</p>
    </div>
    """, unsafe_allow_html=True)


def get_analysis_settings():
    """Sidebar controls for the matcher."""
    st.sidebar.markdown("### ⚙️ Analysis Settings")
    window_size = st.sidebar.slider(
        "Window size (words)",
        min_value=2,
        max_value=15,
        value=max(2, min(15, config.DEFAULT_WINDOW_SIZE)),
        help="Number of consecutive words hashed and compared at a time"
    )
    rolling = st.sidebar.checkbox(
        "Use rolling hash",
        value=config.USE_ROLLING_HASH,
        help="Update each window's hash from the previous one instead of recomputing it"
    )
    if config.MAX_INPUT_WORDS:
        st.sidebar.caption(f"Each text is limited to {config.MAX_INPUT_WORDS} words.")
    return window_size, rolling


def get_text_inputs():
    """Side-by-side text areas for the two documents."""
    col1, col2 = st.columns(2)
    with col1:
        source_text = st.text_area(
            "📄 Original Text",
            key="source_text",
            height=260,
            placeholder="Paste or type the original text here..."
        )
        st.caption(f"{word_count(source_text)} words")
    with col2:
        suspect_text = st.text_area(
            "🔎 Suspected Text",
            key="suspect_text",
            height=260,
            placeholder="Paste or type the suspected text here..."
        )
        st.caption(f"{word_count(suspect_text)} words")
    return source_text, suspect_text


def clear_inputs():
    st.session_state.source_text = ""
    st.session_state.suspect_text = ""
    st.session_state.analysis_result = None


@handle_exceptions()
def run_analysis(source_text, suspect_text, window_size, rolling):
    """Validate input sizes and run the detector."""
    ParameterValidator.validate_word_limit(word_count(source_text), "Original text", config.MAX_INPUT_WORDS)
    ParameterValidator.validate_word_limit(word_count(suspect_text), "Suspected text", config.MAX_INPUT_WORDS)
    detector = PlagiarismDetector(window_size=window_size, rolling=rolling)
    return detector.analyze(source_text, suspect_text)


def display_overview(result):
    """Metric cards for the overall score."""
    level = result.level
    css_class, color = LEVEL_STYLES[level]

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.markdown(f"""
        <div class="metric-card {css_class}">
            <h3 style="color: {color};">{result.percentage}%</h3>
            <p>Plagiarism Score · {level.value}</p>
        </div>
        """, unsafe_allow_html=True)

    with col2:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #3b82f6;">{result.total_words}</h3>
            <p>Total Words</p>
        </div>
        """, unsafe_allow_html=True)

    with col3:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #8b5cf6;">{result.matched_words}</h3>
            <p>Matched Words</p>
        </div>
        """, unsafe_allow_html=True)

    with col4:
        st.markdown(f"""
        <div class="metric-card">
            <h3 style="color: #06b6d4;">{len(result.matches)}</h3>
            <p>Matching Windows</p>
        </div>
        """, unsafe_allow_html=True)

    st.progress(result.percentage / 100)

    if result.single_word_mode:
        st.info("The texts are too short for word windows, so they were compared word by word.")


def display_heatmap(result):
    st.markdown("## 🗺️ Plagiarism Heatmap")
    if not result.segments:
        st.info("The suspected text has no words to highlight.")
        return
    st.markdown(f'<div class="heatmap">{highlight_html(result)}</div>', unsafe_allow_html=True)
    st.caption("🟥 Exact match · 🟨 Partial match · plain: original content")

    with st.expander("📊 Word breakdown", expanded=False):
        st.dataframe(summary_frame(result), use_container_width=True, hide_index=True)
        st.dataframe(segments_frame(result), use_container_width=True, hide_index=True)


def display_matches(result):
    st.markdown("## 🔗 Matching Windows")
    if not result.matches:
        st.info("No matching windows found.")
        return
    st.dataframe(matches_frame(result), use_container_width=True, hide_index=True)


def display_trace(result):
    st.markdown("## 🧮 Algorithm Steps")
    if not result.trace:
        st.info("No algorithm steps recorded for this comparison.")
        return
    st.caption(f"First {len(result.trace)} windows processed")
    for step in result.trace:
        icon = "✅" if step.matched else "➖"
        with st.expander(f"{icon} Step {step.step}: hash {step.hash_value}", expanded=False):
            st.markdown(f"**Window:** `{step.window_text}`")
            st.markdown(step.description)
            if step.source_match:
                st.markdown(f"**Source window:** `{step.source_match}`")
    with st.expander("📋 Trace table", expanded=False):
        st.dataframe(trace_frame(result), use_container_width=True, hide_index=True)


def display_demo_controls():
    st.sidebar.markdown("### 🎯 Try a Demo")
    st.sidebar.caption("Load sample texts to see the algorithm in action.")
    st.sidebar.button(
        "📝 Load Sample Texts",
        on_click=load_sample_texts,
        args=(st.session_state,),
        use_container_width=True
    )


def display_algorithm_info():
    with st.sidebar.expander("ℹ️ How it works", expanded=False):
        st.markdown(f"""
        1. Both texts are lowercased, stripped of punctuation and split into words.
        2. Every window of consecutive source words is hashed (base {BASE}, modulus {PRIME}) into an index.
        3. Each suspected window is hashed the same way; a hash hit is confirmed by comparing the text.
        4. Without an exact match, a window sharing at least {PARTIAL_MATCH_RATIO:.0%} of its words
           with some source window counts as a partial match.
        """)


def main():
    initialize_app()
    window_size, rolling = get_analysis_settings()
    display_demo_controls()
    display_algorithm_info()

    source_text, suspect_text = get_text_inputs()

    col1, col2 = st.columns([1, 5])
    with col1:
        analyze_clicked = st.button("🚀 Analyze", type="primary")
    with col2:
        st.button("🧹 Clear", on_click=clear_inputs)

    if analyze_clicked:
        if not source_text.strip() or not suspect_text.strip():
            st.error("Please provide both original and suspected text to analyze.")
        else:
            try:
                with st.spinner("Matching windows..."):
                    st.session_state.analysis_result = run_analysis(
                        source_text, suspect_text, window_size, rolling
                    )
                st.success(
                    f"Analysis complete: {st.session_state.analysis_result.percentage}% similarity found."
                )
            except ValidationError as e:
                logger.warning(f"Rejected analysis input: {e.message}")
                st.error(f"❌ {e.message}")

    result = st.session_state.analysis_result
    if result is not None:
        st.markdown("---")
        display_overview(result)
        display_heatmap(result)
        display_matches(result)
        display_trace(result)

    st.markdown("---")
    st.markdown("""
    <div style="text-align: center; color: #6b7280;">
        <p>🔬 <strong>Plagiarism Tracer</strong> · no AI, no external APIs, just string matching</p>
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
