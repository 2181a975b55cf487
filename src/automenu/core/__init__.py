"""
コア機能

例外・メッセージ・型マーカー・操作テーブルを提供します。
"""
