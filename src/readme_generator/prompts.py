import re

README_INSTRUCTIONS = """\
**Instructions for README Generation:**
1. **Infer Purpose:** Using only the file names (such as package.json or \
requirements.txt) and the file contents above, infer the project's likely \
purpose and its primary language and framework.
2. **Structure:** Write a standard README with these sections:
   * Project Title (infer a fitting one)
   * Description (a brief overview based on your inference)
   * Tech Stack (the inferred technologies)
   * Getting Started (generic steps for the package managers you identified, \
e.g. `npm install` or `pip install -r requirements.txt`, starting with cloning \
the repository)
   * Usage (inferred basic usage, otherwise a placeholder)
   * File Structure Overview (key directories, if apparent from the file list)
   * Contributing (generic placeholder)
   * License (generic placeholder unless a license file was provided)
3. **Content Source:** Use the provided context strictly. Do not add features, \
instructions or technologies that the context does not mention or strongly \
imply. If the context is insufficient for a section, say so or use a placeholder.
4. **Formatting:** Use standard Markdown and format commands as code.
5. **Conciseness:** Be informative but avoid excessive jargon.\
"""

_BACKTICK_RUN = re.compile(r"`+")


def _fence_for(text: str) -> str:
    # A fence must be longer than any backtick run it encloses
    longest = max((len(m.group()) for m in _BACKTICK_RUN.finditer(text)), default=0)
    return "`" * max(3, longest + 1)


def build_readme_prompt(repo_url: str, context: str) -> str:
    fence = _fence_for(context)
    return (
        "Based *only* on the following extracted context from the public code "
        f"repository at {repo_url}, generate a comprehensive README.md file in "
        "Markdown format.\n\n"
        "**Extracted Context:**\n"
        f"{fence}\n{context}\n{fence}\n\n"
        + README_INSTRUCTIONS
    )
