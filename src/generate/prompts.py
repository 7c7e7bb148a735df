# Prompt templates for the three request kinds.

DIAGRAM_OUTPUT_NAME = "diagram_output"


def build_diagram_prompt(prompt: str, formatted_imports: str) -> str:
    return f"""Generate a complete TypeScript script using the diagrams package to create a system diagram.
The script should only use the following imports:

{formatted_imports}

Ensure the output image is always saved as '{DIAGRAM_OUTPUT_NAME}'.
Only return the complete TypeScript code wrapped in triple backticks.

User prompt: {prompt}"""


def build_code_prompt(prompt: str) -> str:
    return f"""Generate a complete and valid code snippet based on the following prompt:

{prompt}

Ensure the code is syntactically correct and complete, wrapped in triple backticks.
"""


def build_text_prompt(prompt: str) -> str:
    return f"""Please generate a detailed and relevant text-based response based on the following prompt:

{prompt}
"""
