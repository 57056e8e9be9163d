#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FST Date Parsers Web Demo
Streamlit front end for trying recognizers against a chosen reference date
"""

import streamlit as st
from datetime import date

from fst_date_parsers import DateParser, NoAlternativeMatched, ParseError
from fst_date_parsers.core.logger import auto_setup

auto_setup()


# Page configuration
st.set_page_config(
    page_title="FST Date Parsers", page_icon="📅", layout="wide", initial_sidebar_state="collapsed"
)

st.markdown(
    """
<style>
    .block-container {
        padding-top: 2rem;
        padding-bottom: 1rem;
        max-width: 95%;
    }

    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        text-align: center;
        margin-bottom: 0.3rem;
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
    }
    .sub-header {
        text-align: center;
        color: #666;
        font-size: 1rem;
        margin-bottom: 1rem;
    }

    .date-point {
        background: white;
        padding: 0.8rem;
        border-radius: 0.5rem;
        margin: 0.5rem 0;
        box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1);
        border-left: 3px solid #667eea;
    }
    .date-display {
        font-size: 1.1rem;
        font-weight: bold;
        color: #333;
        font-family: 'Monaco', 'Menlo', monospace;
    }
</style>
""",
    unsafe_allow_html=True,
)

LANGUAGES = {
    "English": ("en.", "versatile"),
    "Русский": ("ru.", "ru.bundle"),
    "Numeric": ("numeric.", "numeric.dd_mm_y4"),
    "Quick": ("quick.", "quick.bundle"),
}

EXAMPLES = {
    "English": ["tomorrow", "the day after tomorrow", "fri.", "13.06.2024", "+2 weeks"],
    "Русский": ["завтра", "позавчера", "пт.", "01.02.2024", "15 марта"],
    "Numeric": ["13/06/2024", "2024-06-13", "06-13-2024", "01/02", "9"],
    "Quick": ["+3", "- 10 days", "+1 неделя"],
}


@st.cache_resource
def get_parser():
    """Build the registry once per server process."""
    return DateParser()


def display_match(match, text):
    weekday = match.date.strftime("%A")
    st.markdown(
        f"""
    <div class="date-point">
        <div style="font-weight: bold; color: #667eea; margin-bottom: 0.5rem;">
            📍 {weekday}
        </div>
        <div class="date-display">{match.date.isoformat()}</div>
        <div style="color: #666; font-size: 0.85rem;">
            consumed {match.consumed} of {len(text)} characters: <code>{text[:match.consumed]}</code>
        </div>
    </div>
    """,
        unsafe_allow_html=True,
    )


def main():
    st.markdown('<div class="main-header">📅 FST Date Parsers</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sub-header">Prefix date recognizers built on finite state transducers</div>',
        unsafe_allow_html=True,
    )

    parser = get_parser()
    col_left, col_right = st.columns([1.2, 1], gap="medium")

    with col_left:
        col_config1, col_config2, col_config3 = st.columns(3)

        with col_config1:
            language = st.selectbox("🌍 Language", list(LANGUAGES), index=0)

        prefix, default_name = LANGUAGES[language]
        names = [name for name in parser.names() if name.startswith(prefix)]
        if default_name in parser.parsers and default_name not in names:
            names.insert(0, default_name)
        if not names:
            st.warning(f"⚠️ {language} recognizers are disabled by configuration")
            return

        with col_config2:
            name = st.selectbox(
                "🔧 Recognizer",
                names,
                index=names.index(default_name) if default_name in names else 0,
            )

        with col_config3:
            reference = st.date_input("📅 Reference", date.today())

        example = st.selectbox(
            "💡 Example",
            [""] + EXAMPLES[language],
            format_func=lambda x: "Choose an example..." if x == "" else x,
        )
        text = st.text_input("📝 Text", value=example)
        parse_button = st.button("🚀 Parse", type="primary", use_container_width=True)

    with col_right:
        st.markdown("### 📊 Result")
        st.caption(f"pattern: {parser.parsers[name].pattern}")

        if parse_button and text:
            try:
                display_match(parser.parse(name, text, reference), text)
            except NoAlternativeMatched as e:
                st.warning(f"⚠️ {e}")
                with st.expander("🔍 Member failures"):
                    for member, error in e.failures:
                        st.markdown(f"- **{member}**: {error}")
            except ParseError as e:
                st.warning(f"⚠️ {e}")
        elif parse_button:
            st.warning("⚠️ Enter some text first")
        else:
            st.info("👈 Enter text on the left and press Parse")


if __name__ == "__main__":
    main()
