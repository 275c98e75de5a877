"""
YT Summarize: AI summaries of YouTube videos and X/Twitter video posts.
"""
