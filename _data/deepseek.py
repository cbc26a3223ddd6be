BASE_URL: str = "https://api.deepseek.com"
CHAT_COMPLETIONS_URL: str = f"{BASE_URL}/chat/completions"
MODEL: str = "deepseek-chat"

# Server-Sent-Events framing used by the streaming endpoint
DATA_PREFIX: str = "data:"
DONE_SENTINEL: str = "[DONE]"

# Prefix of every echoed line of the generated message
LINE_MARKER: str = "|"

USER_PROMPT_LABEL: str = "Here are my current Git changes:\n"

SYSTEM_PROMPT: str = """
You are an AI commit message assistant.

Please generate a commit message with the following format:
1. Title (one short sentence, 50-72 characters max).
2. A clear bullet-point list of changes (start each line with "- ").
3. Each line, including bullets, should be under 100 characters.
4. Keep it concise, consistent, and professional.

Example:

Improve error handling in user authentication

- Add detailed error messages for login failures
- Handle timeout errors gracefully
- Refactor error propagation logic for clarity
"""

CONFIG_TEMPLATE: str = f'''
# Git-Aicommit Configuration File
# This file contains configuration settings for the git-aicommit CLI tool

[deepseek]
# DeepSeek API key for AI-powered commit message generation
# Get your API key from: https://platform.deepseek.com/
api_key = ""

# Temperature setting for AI text generation (0.0 to 2.0)
# Lower values (e.g., 0.1) make output more focused and deterministic
# Higher values (e.g., 1.5) make output more random and creative
# Default: 0.7 provides a good balance
temperature = 0.7

# Custom prompt for commit message generation (optional)
# Leave empty to use the default prompt
# The prompt should instruct the AI how to format commit messages
prompt = """{SYSTEM_PROMPT}"""
'''
