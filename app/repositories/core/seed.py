"""Seed roster, project catalog and opening nominations."""

from app.models.core import Person, Project, Role, Team
from app.models.voting import Nomination

SEED_PEOPLE = [
    Person("u1", "Gabriel Paredes", Role.MEMBER, "Dev Sr.", Team.DEVELOPMENT),
    Person("u2", "Jefferson Arriola", Role.MEMBER, "Dev", Team.DEVELOPMENT),
    Person("u3", "Oscar González", Role.MEMBER, "Dev", Team.DEVELOPMENT),
    Person("u4", "Elvis Lopez", Role.MEMBER, "Dev", Team.DEVELOPMENT),
    Person("u5", "Maria Fernanda", Role.MEMBER, "Data Analyst", Team.ANALYTICS),
    Person("u6", "Alejandro Castro", Role.MEMBER, "Ops Eng.", Team.OPERATIONS),
    Person("u7", "Edvin Rodríguez", Role.MEMBER, "Ops Eng.", Team.OPERATIONS),
    Person("u8", "Jonathan Puluc", Role.MEMBER, "Ops Eng.", Team.OPERATIONS),
    Person("u9", "Marvin Rodríguez", Role.MEMBER, "Ops Eng.", Team.OPERATIONS),
    Person("u10", "Ricardo Figueroa", Role.MEMBER, "Ops Eng.", Team.OPERATIONS),
    Person("u11", "Hendrik Hurtarte", Role.MANAGER, "Head of Dev", Team.DEVELOPMENT),
    Person("u12", "Walter Arroy", Role.MANAGER, "PO", Team.GTI),
    Person("u13", "Luz de Maria", Role.ASSISTANT, "IT Assistant", Team.GTI),
    Person("u14", "Axel Tejeda", Role.MANAGER, "Head of Infra", Team.OPERATIONS),
    Person("u15", "Vladimiro Rivera", Role.EXECUTIVE, "CIO", Team.GTI),
    Person("u16", "Admin", Role.ADMIN, "SysAdmin", Team.OPERATIONS),
]

SEED_PROJECTS = [
    Project("p1", "WebApp USA", "US corporate site"),
    Project("p2", "PDF Digital", "Subscription sales of the digital edition"),
    Project("p3", "Market Place", "Goods and services marketplace for migrants' families"),
    Project("p4", "RIANA", "Automatic photo retouching"),
    Project("p5", "AI Observability", "Automated monitoring through AI agents"),
    Project("p6", "Nexus", "RedApp + WebApp Soy502"),
    Project("p7", "CRM Soy502", "Soy502 sales CRM"),
    Project("p8", "Firewall", "SonicWall to Fortinet migration"),
    Project("p9", "CUI->NIT", "Tax authority requirement"),
    Project("p10", "AWS Tagging", "Service tagging"),
]

SEED_NOMINATIONS = [
    Nomination("n1", "u1", "p1", "Automated validations", "u11"),
    Nomination("n2", "u2", "p2", "Payment gateway integration", "u14"),
    Nomination("n3", "u2", "p3", "Stripe integration", "u12"),
    Nomination("n4", "u6", "p4", "Shipped version 2.0.4", "u14"),
]
