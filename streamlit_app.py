"""
Chronus Planning Assistant - Streamlit Frontend

A chat page for the Chronus AI backend: pick a mode, describe what you
need to get done, and review the suggested tasks.

Run with: streamlit run streamlit_app.py
"""
import os

import requests
import streamlit as st

# ============================================================
# Configuration
# ============================================================

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8081")
MODES = ["todo", "study", "final"]
HISTORY_TURNS = 5
MAX_MESSAGE_LENGTH = 4000  # matches the backend sanitizer

st.set_page_config(
    page_title="Chronus Planning Assistant",
    page_icon="🗓️",
    layout="wide",
    initial_sidebar_state="expanded"
)


# ============================================================
# Session State Initialization
# ============================================================

def init_session_state():
    """Initialize session state variables."""
    if "messages" not in st.session_state:
        st.session_state.messages = []
    if "backend_connected" not in st.session_state:
        st.session_state.backend_connected = False


def check_backend() -> bool:
    """Check if backend is available."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=10)
        st.session_state.backend_connected = response.status_code == 200
    except requests.exceptions.RequestException:
        st.session_state.backend_connected = False
    return st.session_state.backend_connected


# ============================================================
# API Functions
# ============================================================

def build_message(prompt: str, history: list, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Prefix the prompt with the last few turns so the stateless backend sees context.

    The oldest turns are dropped until the message fits in max_length,
    since the backend truncates anything longer from the end.
    """
    lines = [f"{turn['role'].upper()}: {turn['content']}" for turn in history[-HISTORY_TURNS:]]
    while lines:
        message = "History:\n" + "\n".join(lines) + f"\n\nUser: {prompt}"
        if len(message) <= max_length:
            return message
        lines.pop(0)
    return prompt


def send_message(message: str, mode: str) -> dict:
    """Send a message to the assistant API."""
    try:
        response = requests.post(
            f"{API_BASE_URL}/api/ai/chat",
            json={"message": message, "mode": mode},
            timeout=60
        )
        if response.status_code == 200:
            return response.json()
        body = response.json()
        return {"error": str(body.get("message") or body.get("detail", "Unknown error"))}
    except ValueError:
        return {"error": f"Unexpected response from backend (HTTP {response.status_code})."}
    except requests.exceptions.Timeout:
        return {"error": "Request timed out."}
    except requests.exceptions.ConnectionError:
        return {"error": "Cannot connect to backend server."}


# ============================================================
# UI Components
# ============================================================

def render_sidebar() -> str:
    """Render the sidebar and return the selected mode."""
    with st.sidebar:
        st.title("🗓️ Chronus")
        st.markdown("*Planning assistant*")

        if st.session_state.backend_connected:
            st.success("🟢 System Online")
        else:
            st.error("🔴 System Offline")
            if st.button("🔄 Reconnect", use_container_width=True):
                if check_backend():
                    st.rerun()

        st.divider()
        mode = st.radio("Mode", MODES, horizontal=True)

        if st.button("🗑️ Clear", help="Clear messages in current chat", use_container_width=True):
            st.session_state.messages = []
            st.rerun()
    return mode


def render_suggestions(suggestions: list):
    """Show suggested tasks as a table."""
    if not suggestions:
        return
    st.markdown("**Suggested tasks**")
    st.dataframe(
        [
            {
                "Task": s.get("name"),
                "Minutes": s.get("duration"),
                "Mode": s.get("mode"),
                "Priority": s.get("priority"),
                "Why": s.get("reason"),
            }
            for s in suggestions
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_chat(mode: str):
    """Render the main chat interface."""
    st.markdown("## 💬 What do you need to plan?")

    for msg in st.session_state.messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])
            render_suggestions(msg.get("suggestions", []))

    if prompt := st.chat_input(f"Describe your {mode} plans..."):
        message = build_message(prompt, st.session_state.messages)
        st.session_state.messages.append({"role": "user", "content": prompt})

        with st.chat_message("user"):
            st.markdown(prompt)

        with st.chat_message("assistant"):
            with st.spinner("Thinking..."):
                response = send_message(message, mode)

            if "error" in response:
                st.error(f"❌ {response['error']}")
                st.session_state.messages.append({
                    "role": "assistant",
                    "content": f"Error: {response['error']}"
                })
            else:
                st.markdown(response.get("reply", ""))
                render_suggestions(response.get("suggestions", []))
                st.session_state.messages.append({
                    "role": "assistant",
                    "content": response.get("reply", ""),
                    "suggestions": response.get("suggestions", []),
                })


# ============================================================
# Main App
# ============================================================

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.backend_connected:
        check_backend()

    mode = render_sidebar()

    if not st.session_state.backend_connected:
        st.warning("⚠️ Cannot connect to backend. Please start the server:")
        st.code("uvicorn chronus_ai.api.main:app --reload --port 8081", language="bash")
        return

    render_chat(mode)


if __name__ == "__main__":
    main()
