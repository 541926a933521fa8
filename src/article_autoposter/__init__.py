"""Article Autoposter - A Telegram-triggered bot that posts articles to X.

A message sent to the bot names an article ID. The service looks the article
up on the content API, asks an LLM for hashtags, publishes a post to X and
reports the outcome back to the Telegram chat.

Components:
- main_webhook: FastAPI webhook receiving Telegram updates
- pipeline: stage orchestration and failure absorption
- content: article lookup
- llm: hashtag generation via OpenRouter
- social: post publishing to X
- telegram: update parsing, secret verification, notifications
"""
