from readme_generator import prompts


def test_embeds_url_and_context():
    context = "Repository Structure and Key Files:\n\n- main.py\n"
    prompt = prompts.build_readme_prompt("https://github.com/psf/requests", context)
    assert "https://github.com/psf/requests" in prompt
    assert f"```\n{context}\n```" in prompt


def test_instructions_follow_context():
    prompt = prompts.build_readme_prompt("https://example.com/repo", "ctx")
    assert prompt.index("ctx") < prompt.index("1. **Infer Purpose:**")
    for step in ("2. **Structure:**", "3. **Content Source:**", "4. **Formatting:**"):
        assert step in prompt


def test_fence_outlasts_backticks_in_context():
    context = "--- File: README.md ---\n```bash\npip install .\n```\n"
    prompt = prompts.build_readme_prompt("https://example.com/repo", context)
    assert f"````\n{context}\n````" in prompt
