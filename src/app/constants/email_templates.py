"""Templates fixos dos e-mails enviados pelo emissor.

Conteúdo no idioma do formulário de solicitação. Placeholders são
preenchidos com str.format pelo Notifier.
"""

from __future__ import annotations

UNKNOWN_REQUESTER = "不明"

SUCCESS_SUBJECT = "【重要】Grafana Cloud トークン発行完了のお知らせ"

SUCCESS_BODY = """\
{recipient_name} 様

Grafana Cloud のトークン発行申請を受け付け、以下のトークンを発行しました。

トークン名: {token_name}
トークンキー: {token_key}
有効期限: {expires_at}

{disclosure}
不明な点があれば管理者までお問い合わせください。
"""

# Aviso obrigatório: a chave não é recuperável e é confidencial
SECRET_DISCLOSURE_NOTICE = """\
--- 重要事項 ---
- このトークンキーは 機密性の高い情報です。パスワードと同様に扱ってください。
- このトークンキーは 組織外に共有しないでください。
- このトークンキーは管理者からも確認できません。紛失した場合は再発行が必要です。
- このトークンは指定された有効期限後に自動的に失効します。
"""

FAILURE_SUBJECT = "【警告】Grafanaトークン発行処理でエラーが発生しました"

FAILURE_BODY = """\
Grafana Cloud トークン発行処理中にエラーが発生しました。

発生日時: {occurred_at}
対象シート: {location}
対象行: {row}
申請者メールアドレス (推定): {requester}

エラー詳細:
{error_message}

スタックトレース:
{stack_trace}

ログやスプレッドシートの該当行を確認してください。
"""
