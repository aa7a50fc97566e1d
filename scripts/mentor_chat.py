"""
Terminal mentor chat against a running SkillNest API.

    python scripts/mentor_chat.py --user-id me [--base-url http://localhost:8000]
"""
import argparse
import logging
import os
import sys

# Ensure we can import skillnest modules
sys.path.append(os.getcwd())

from skillnest.client import SkillNestAPIError, SkillNestClient

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Chat with the SkillNest career mentor")
    parser.add_argument("--base-url", default=os.getenv("SKILLNEST_URL", "http://localhost:8000"))
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--api-key", default=os.getenv("SKILLNEST_FUNCTION_KEY"))
    args = parser.parse_args()

    client = SkillNestClient(args.base_url, args.user_id, api_key=args.api_key)
    history = [{"role": m["role"], "content": m["content"]} for m in client.chat_history()]
    user_context = client.user_context()

    print(f"Loaded {len(history)} earlier messages. /clear resets the history, /quit exits.")
    while True:
        try:
            line = input("\nyou> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        if line == "/quit":
            break
        if line == "/clear":
            print(f"Cleared {client.clear_chat()} messages.")
            history = []
            continue

        printed = 0

        def show(text):
            nonlocal printed
            sys.stdout.write(text[printed:])
            sys.stdout.flush()
            printed = len(text)

        sys.stdout.write("mentor> ")
        try:
            reply = client.send_chat_message(line, history, user_context, on_delta=show)
        except SkillNestAPIError as e:
            print(f"\n[error] {e.message}")
            continue
        print()
        history.append({"role": "user", "content": line})
        if reply:
            history.append({"role": "assistant", "content": reply})


if __name__ == "__main__":
    main()
