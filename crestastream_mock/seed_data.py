"""Demo records loaded when the server starts.

The automation suite logs in with these credentials and asserts against the
seeded conversations, so ids and values are stable.
"""

from __future__ import annotations

from .agents import Agent
from .conversations.schemas import Conversation
from .security.identities import Identity

DEMO_IDENTITIES = (
    Identity("admin@crestastream.com", "admin123", "admin", "Admin User"),
    Identity("agent@crestastream.com", "agent123", "agent", "Test Agent"),
    Identity("manager@crestastream.com", "manager123", "manager", "Manager User"),
)
_AGENTS = [
    {"id": "agent-001", "name": "Ayşe Demir", "team": "Müşteri Hizmetleri", "status": "online"},
    {"id": "agent-002", "name": "Mehmet Öz", "team": "Satış", "status": "online"},
    {"id": "agent-003", "name": "Can Yıldız", "team": "Teknik Destek", "status": "offline"},
]

_CONVERSATIONS = [
    {
        "id": "conv-001",
        "title": "Müşteri Şikayeti - Kargo Gecikmesi",
        "customerName": "Ahmet Yılmaz",
        "agentName": "Ayşe Demir",
        "agentId": "agent-001",
        "sentiment": "negative",
        "status": "resolved",
        "aiScore": 42,
        "duration": 325,
        "createdAt": "2024-01-15T09:30:00Z",
        "messages": [
            {"role": "customer", "text": "Siparişim 5 gündür gelmedi!"},
            {"role": "agent", "text": "Özür dilerim, hemen kontrol ediyorum."},
        ],
    },
    {
        "id": "conv-002",
        "title": "Ürün Bilgisi Talebi",
        "customerName": "Fatma Kaya",
        "agentName": "Mehmet Öz",
        "agentId": "agent-002",
        "sentiment": "positive",
        "status": "completed",
        "aiScore": 89,
        "duration": 180,
        "createdAt": "2024-01-15T10:15:00Z",
        "messages": [
            {"role": "customer", "text": "Bu ürünün garantisi var mı?"},
            {"role": "agent", "text": "2 yıl garantisi bulunmaktadır."},
        ],
    },
    {
        "id": "conv-003",
        "title": "İade Talebi",
        "customerName": "Ali Veli",
        "agentName": "Ayşe Demir",
        "agentId": "agent-001",
        "sentiment": "neutral",
        "status": "pending",
        "aiScore": 65,
        "duration": 420,
        "createdAt": "2024-01-15T11:00:00Z",
        "messages": [
            {"role": "customer", "text": "Ürünü iade etmek istiyorum."},
            {"role": "agent", "text": "İade talebinizi oluşturuyorum."},
        ],
    },
    {
        "id": "conv-004",
        "title": "Teknik Destek",
        "customerName": "Zeynep Aksoy",
        "agentName": "Can Yıldız",
        "agentId": "agent-003",
        "sentiment": "positive",
        "status": "completed",
        "aiScore": 95,
        "duration": 240,
        "createdAt": "2024-01-15T14:30:00Z",
        "messages": [
            {"role": "customer", "text": "Cihazım açılmıyor."},
            {"role": "agent", "text": "Reset tuşuna 10 saniye basılı tutun."},
        ],
    },
    {
        "id": "conv-005",
        "title": "Fatura Sorunu",
        "customerName": "Murat Çelik",
        "agentName": "Mehmet Öz",
        "agentId": "agent-002",
        "sentiment": "negative",
        "status": "escalated",
        "aiScore": 28,
        "duration": 600,
        "createdAt": "2024-01-15T16:00:00Z",
        "messages": [
            {"role": "customer", "text": "Faturamda yanlış tutar var!"},
            {"role": "agent", "text": "Durumu üst birime aktarıyorum."},
        ],
    },
]

AI_SUGGESTIONS = (
    {
        "type": "improvement",
        "text": "Negatif görüşmelerde empati cümleleri kullanın",
        "priority": "high",
    },
    {"type": "training", "text": "İade prosedürleri eğitimi önerilir", "priority": "medium"},
    {"type": "alert", "text": "3 görüşme yükseltme bekliyor", "priority": "high"},
)


def demo_agents() -> list[Agent]:
    return [Agent.model_validate(a) for a in _AGENTS]


def demo_conversations() -> list[Conversation]:
    return [Conversation.model_validate(c) for c in _CONVERSATIONS]
