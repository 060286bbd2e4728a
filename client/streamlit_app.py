import streamlit as st

from client.conversation import ConversationClient
from client.http_relay import HttpRelay
from config.settings import get_settings


st.set_page_config(page_title="NutriGuide", page_icon="🎓")

st.title("🎓 NutriGuide")
st.caption("Your Nutraceuticals Learning Assistant")


# -----------------------------
# Session state: one conversation per browser session
# -----------------------------
if "conversation" not in st.session_state:
    settings = get_settings()
    st.session_state.conversation = ConversationClient(
        HttpRelay(settings.relay_url, timeout=settings.relay_timeout)
    )

conversation: ConversationClient = st.session_state.conversation


# -----------------------------
# Welcome card
# -----------------------------
if not conversation.history:
    with st.container(border=True):
        st.subheader("Welcome to NutriGuide! 🎓")
        st.write(
            "Your friendly AI assistant for learning about Nutraceuticals. Ask me anything "
            "about definitions, classifications, functional foods, phytochemicals, "
            "health benefits, and more!"
        )
        left, right = st.columns(2)
        left.markdown("**📚 Study Help**  \nShort notes, summaries, and exam-style answers")
        right.markdown("**🧪 Detailed Explanations**  \nComplex topics with simple examples")
        left.markdown("**📝 Assignment Help**  \nPPT points and assignment answers")
        right.markdown("**🎯 Exam Prep**  \n1-mark, 2-mark, and 5-mark questions")


# -----------------------------
# Conversation
# -----------------------------
for m in conversation.history:
    with st.chat_message(m.role.value):
        st.markdown(m.content)


# -----------------------------
# Chat input & relay response
# -----------------------------
prompt = st.chat_input(
    "Ask me anything about nutraceuticals...",
    disabled=conversation.pending,
)

if prompt and prompt.strip():
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            conversation.submit(prompt)
    st.rerun()

for note in list(conversation.notifications):
    st.toast(note.text, icon=note.icon)
    conversation.dismiss(note)
