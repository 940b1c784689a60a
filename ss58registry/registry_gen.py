# Python SS58 Registry Library
#
# Copyright 2018-2024 Stichting Polkascan (Polkascan Foundation).
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# Generated from ss58-registry.json by `python -m ss58registry.compiler`, do not edit.

from .known import KnownAddressFormat
from .token import TokenRegistryBase

__all__ = [
    'TokenRegistry',
    'AddressFormatRegistry',
    'ALL_FORMATS',
    'ALL_NAMES',
    'PREFIX_TO_INDEX',
    'RESERVED_PREFIXES',
    'RUN_STARTS',
    'RUN_ENDS',
    'TOKENS',
]


class TokenRegistry(TokenRegistryBase):
    """
    Every distinct token (symbol and decimals) of the registered networks
    """
    Aca = ('ACA', 12)
    Air = ('AIR', 18)
    Ajun = ('AJUN', 12)
    Anlog = ('ANLOG', 12)
    Ares = ('ARES', 12)
    Astr = ('ASTR', 18)
    Avt = ('AVT', 18)
    Baju = ('BAJU', 12)
    Bbb = ('BBB', 18)
    Bnc = ('BNC', 12)
    Bsty = ('BSTY', 18)
    Bsx = ('BSX', 12)
    Caps = ('CAPS', 18)
    Cere = ('CERE', 10)
    Cess = ('CESS', 12)
    Cfg = ('CFG', 18)
    Clv = ('CLV', 18)
    Cru = ('CRU', 12)
    Ctx0 = ('CTX', 0)
    Ctx18 = ('CTX', 18)
    Dck = ('DCK', 6)
    Dentx = ('DENTX', 18)
    Dhi = ('DHI', 12)
    Dico = ('DICO', 14)
    Dot = ('DOT', 10)
    Edg = ('EDG', 18)
    Efi = ('EFI', 18)
    Eq = ('EQ', 9)
    Eqd = ('EQD', 9)
    Fis = ('FIS', 12)
    Flip = ('FLIP', 18)
    Fren = ('FREN', 12)
    G1 = ('G1', 2)
    Geek = ('GEEK', 12)
    Gens = ('GENS', 9)
    Glmr = ('GLMR', 18)
    Gm = ('GM', 0)
    Gn = ('GN', 0)
    Goro = ('GORO', 9)
    Hash = ('HASH', 18)
    Hdx = ('HDX', 12)
    Hmnd = ('HMND', 18)
    Ibtc = ('IBTC', 8)
    Icz = ('ICZ', 18)
    Intr = ('INTR', 10)
    JDot = ('jDOT', 10)
    Kab = ('KAB', 12)
    Kapex = ('KAPEX', 12)
    Kar = ('KAR', 12)
    Kbtc = ('KBTC', 8)
    Kico = ('KICO', 14)
    Kilt = ('KILT', 15)
    Kint = ('KINT', 12)
    Klp = ('KLP', 12)
    Kma = ('KMA', 12)
    Ksm = ('KSM', 12)
    Kton = ('KTON', 9)
    Lami = ('LAMI', 18)
    Layr = ('LAYR', 12)
    Lit = ('LIT', 12)
    Lpt0 = ('LPT0', 9)
    Lpt1 = ('LPT1', 9)
    Manta = ('MANTA', 18)
    Math = ('MATH', 18)
    Mos = ('MOS', 18)
    Movr = ('MOVR', 18)
    Myth = ('MYTH', 18)
    Neat = ('NEAT', 12)
    Neer = ('NEER', 18)
    Net = ('NET', 18)
    Nmt = ('NMT', 12)
    Nodl = ('NODL', 11)
    Nom = ('NOM', 10)
    Oak = ('OAK', 10)
    Otp = ('OTP', 12)
    Pcx = ('PCX', 8)
    Pdex = ('PDEX', 12)
    Pha = ('PHA', 12)
    Pica = ('PICA', 12)
    Pkf = ('PKF', 18)
    Pks = ('PKS', 18)
    Polyx = ('POLYX', 6)
    Qtz = ('QTZ', 18)
    Rey = ('REY', 18)
    Ring = ('RING', 9)
    Ssc = ('SSC', 18)
    Syn = ('SYN', 12)
    TSsc = ('tSSC', 18)
    Tcess = ('TCESS', 12)
    Tdfy = ('TDFY', 12)
    Teer = ('TEER', 12)
    Tnkr = ('TNKR', 12)
    Trn = ('TRN', 12)
    Tur = ('TUR', 10)
    Uart = ('UART', 12)
    Uink = ('UINK', 12)
    Unq = ('UNQ', 18)
    UsDv = ('USDv', 15)
    Xor = ('XOR', 18)
    Xrt = ('XRT', 9)
    Xx = ('XX', 9)
    Zero = ('ZERO', 18)
    Ztg = ('ZTG', 10)


class AddressFormatRegistry(KnownAddressFormat):
    """
    A known address (sub)format/network ID for SS58, sorted by network name
    """
    #: Bare 32-bit Ed25519 public key.
    BareEd25519Account = 3
    #: Bare 32-bit ECDSA SECP-256k1 public key.
    BareSecp256k1Account = 43
    #: Bare 32-bit Schnorr/Ristretto (S/R 25519) public key.
    BareSr25519Account = 1
    #: DICO - <https://dico.io>
    DicoAccount = 53
    #: KICO - <https://dico.io>
    KicoAccount = 52
    #: SNOW: ICE Canary Network - <https://icenetwork.io>
    SnowAccount = 2207
    #: Turing Network - <https://oak.tech/turing/home/>
    TuringAccount = 2114
    #: Acala - <https://acala.network/>
    AcalaAccount = 10
    #: Ajuna Network - <https://ajuna.io>
    AjunaAccount = 1328
    #: Altair - <https://centrifuge.io/>
    AltairAccount = 136
    #: Analog Timechain - <https://analog.one>
    AnalogTimechainAccount = 12850
    #: Ares Protocol - <https://www.aresprotocol.com/>
    AresAccount = 34
    #: Astar Network - <https://astar.network>
    AstarAccount = 5
    #: Aventus Mainnet - <https://aventus.io>
    AventusAccount = 65
    #: Bajun Network - <https://ajuna.io>
    BajunAccount = 1337
    #: Basilisk - <https://bsx.fi>
    BasiliskAccount = 10041
    #: Bifrost - <https://bifrost.finance/>
    BifrostAccount = 6
    #: Bitgreen - <https://bitgreen.org/>
    BitgreenAccount = 2106
    #: Calamari: Manta Canary Network - <https://manta.network>
    CalamariAccount = 78
    #: Centrifuge Chain - <https://centrifuge.io/>
    CentrifugeAccount = 36
    #: Cere Network - <https://cere.network>
    CereAccount = 54
    #: CESS - <https://cess.cloud>
    CessAccount = 11330
    #: CESS Testnet - <https://cess.cloud>
    CessTestnetAccount = 777
    #: Chainflip - <https://chainflip.io/>
    ChainflipAccount = 2112
    #: ChainX - <https://chainx.org/>
    ChainxAccount = 44
    #: Clover Finance - <https://clover.finance>
    CloverAccount = 128
    #: Composable Finance - <https://composable.finance>
    ComposableAccount = 50
    #: Automata ContextFree - <https://ata.network>
    ContextfreeAccount = 11820
    #: CORD Network - <https://cord.network/>
    CordAccount = 29
    #: Crust Network - <https://crust.network>
    CrustAccount = 66
    #: Dark Mainnet
    DarkAccount = 17
    #: Darwinia Network - <https://darwinia.network/>
    DarwiniaAccount = 18
    #: DataHighway
    DatahighwayAccount = 33
    #: DENTNet - <https://www.dentnet.io>
    DentnetAccount = 9807
    #: Dock Mainnet - <https://dock.io>
    DockMainnetAccount = 22
    #: Dock Testnet - <https://dock.io>
    DockTestnetAccount = 21
    #: Edgeware - <https://edgewa.re>
    EdgewareAccount = 7
    #: Efinity - <https://efinity.io/>
    EfinityAccount = 1110
    #: Equilibrium Network - <https://equilibrium.io>
    EquilibriumAccount = 68
    #: Ğ1 - <https://duniter.org>
    G1Account = 4450
    #: GeekCash - <https://geekcash.org>
    GeekAccount = 19
    #: Genshiro Network - <https://genshiro.equilibrium.io>
    GenshiroAccount = 67
    #: GM - <https://gmordie.com>
    GmAccount = 7013
    #: GORO Network - <https://goro.network>
    GoroAccount = 14697
    #: Hashed Network - <https://hashed.network>
    HashedAccount = 9072
    #: Heiko - <https://parallel.fi/>
    HeikoAccount = 110
    #: Humanode Network - <https://humanode.io>
    HumanodeAccount = 5234
    #: HydraDX - <https://hydradx.io>
    HydradxAccount = 63
    #: Impact Protocol Network - <https://impactprotocol.network/>
    ImpactAccount = 12155
    #: Integritee - <https://integritee.network>
    IntegriteeAccount = 13
    #: Integritee Incognito - <https://integritee.network>
    IntegriteeIncognitoAccount = 113
    #: Interlay - <https://interlay.io/>
    InterlayAccount = 2032
    #: Jupiter - <https://jupiter.patract.io>
    JupiterAccount = 26
    #: Kabocha - <https://kabocha.network>
    KabochaAccount = 27
    #: Kapex - <https://totemaccounting.com>
    KapexAccount = 2007
    #: Karura - <https://karura.network/>
    KaruraAccount = 8
    #: Katal Chain
    KatalchainAccount = 4
    #: KILT Spiritnet - <https://kilt.io/>
    KiltAccount = 38
    #: Kintsugi - <https://interlay.io/>
    KintsugiAccount = 92
    #: Kulupu - <https://kulupu.network/>
    KulupuAccount = 16
    #: Kusama Relay Chain - <https://kusama.network>
    KusamaAccount = 2
    #: Laminar - <http://laminar.network/>
    LaminarAccount = 11
    #: Litentry Network - <https://litentry.com/>
    LitentryAccount = 31
    #: Litmus Network - <https://litentry.com/>
    LitmusAccount = 131
    #: Manta network - <https://manta.network>
    MantaAccount = 77
    #: MathChain mainnet - <https://mathwallet.org>
    MathchainAccount = 39
    #: MathChain testnet - <https://mathwallet.org>
    MathchainTestnetAccount = 40
    #: Moonbeam - <https://moonbeam.network>
    MoonbeamAccount = 1284
    #: Moonriver - <https://moonbeam.network>
    MoonriverAccount = 1285
    #: Mosaic Chain - <https://mosaicchain.io>
    MosaicChainAccount = 14998
    #: Mythos - <https://mythos.foundation>
    MythosAccount = 29972
    #: Neatcoin Mainnet - <https://neatcoin.org>
    NeatcoinAccount = 48
    #: NFTMart - <https://nftmart.io>
    NftmartAccount = 12191
    #: Nodle Chain - <https://nodle.io/>
    NodleAccount = 37
    #: OAK Network - <https://oak.tech>
    OakAccount = 51
    #: OriginTrail Parachain - <https://parachain.origintrail.io/>
    OrigintrailParachainAccount = 101
    #: Parallel - <https://parallel.fi/>
    ParallelAccount = 172
    #: Peaq Network - <https://www.peaq.network/>
    PeaqAccount = 1221
    #: Phala Network - <https://phala.network>
    PhalaAccount = 30
    #: Picasso - <https://picasso.composable.finance>
    PicassoAccount = 49
    #: Pioneer Network by Bit.Country - <https://bit.country>
    PioneerNetworkAccount = 268
    #: Polimec Protocol - <https://www.polimec.org/>
    PoliAccount = 41
    #: Polkadex Mainnet - <https://polkadex.trade>
    PolkadexAccount = 89
    #: Polkadot Relay Chain - <https://polkadot.network>
    PolkadotAccount = 0
    #: PolkaFoundry Network - <https://polkafoundry.com>
    PolkafoundryAccount = 98
    #: PolkaSmith Canary Network - <https://polkafoundry.com>
    PolkasmithAccount = 90
    #: Polymesh - <https://polymath.network/>
    PolymeshAccount = 12
    #: Pontem Network - <https://pontem.network>
    PontemNetworkAccount = 105
    #: QUARTZ by UNIQUE - <https://unique.network>
    QuartzMainnetAccount = 255
    #: This prefix is reserved.
    Reserved46Account = 46
    #: This prefix is reserved.
    Reserved47Account = 47
    #: Laminar Reynolds Canary - <http://laminar.network/>
    ReynoldsAccount = 9
    #: Robonomics - <https://robonomics.network>
    RobonomicsAccount = 32
    #: Sapphire by Unique - <https://unique.network>
    SapphireMainnetAccount = 8883
    #: ShiftNrg
    ShiftAccount = 23
    #: Social Network - <https://social.network>
    SocialNetworkAccount = 252
    #: SORA Network - <https://sora.org>
    SoraAccount = 69
    #: SORA Kusama Parachain - <https://sora.org>
    SoraKusamaParaAccount = 420
    #: Stafi - <https://stafi.io>
    StafiAccount = 20
    #: Subsocial
    SubsocialAccount = 28
    #: Subspace - <https://subspace.network>
    SubspaceAccount = 6094
    #: Subspace testnet - <https://subspace.network>
    SubspaceTestnetAccount = 2254
    #: Substrate - <https://substrate.io/>
    SubstrateAccount = 42
    #: Synesthesia - <https://synesthesia.network/>
    SynesthesiaAccount = 15
    #: t3rn - <https://t3rn.io/>
    T3rnAccount = 9935
    #: Ternoa - <https://www.ternoa.network>
    TernoaAccount = 995
    #: Tidefi - <https://tidefi.com>
    TidefiAccount = 7007
    #: Tinker - <https://invarch.network>
    TinkerAccount = 117
    #: Totem - <https://totemaccounting.com>
    TotemAccount = 14
    #: UniArts Network - <https://uniarts.me>
    UniartsAccount = 45
    #: Unique Network - <https://unique.network>
    UniqueMainnetAccount = 7391
    #: Valiu Liquidity Network - <https://valiu.com/>
    VlnAccount = 35
    #: xx network - <https://xx.network>
    XxnetworkAccount = 55
    #: Zeitgeist - <https://zeitgeist.pm>
    ZeitgeistAccount = 73
    #: ZERO - <https://zero.io>
    ZeroAccount = 24
    #: ZERO Alphaville - <https://zero.io>
    ZeroAlphavilleAccount = 25


#: All known address formats (sorted by network name)
ALL_FORMATS = (
    AddressFormatRegistry.BareEd25519Account,
    AddressFormatRegistry.BareSecp256k1Account,
    AddressFormatRegistry.BareSr25519Account,
    AddressFormatRegistry.DicoAccount,
    AddressFormatRegistry.KicoAccount,
    AddressFormatRegistry.SnowAccount,
    AddressFormatRegistry.TuringAccount,
    AddressFormatRegistry.AcalaAccount,
    AddressFormatRegistry.AjunaAccount,
    AddressFormatRegistry.AltairAccount,
    AddressFormatRegistry.AnalogTimechainAccount,
    AddressFormatRegistry.AresAccount,
    AddressFormatRegistry.AstarAccount,
    AddressFormatRegistry.AventusAccount,
    AddressFormatRegistry.BajunAccount,
    AddressFormatRegistry.BasiliskAccount,
    AddressFormatRegistry.BifrostAccount,
    AddressFormatRegistry.BitgreenAccount,
    AddressFormatRegistry.CalamariAccount,
    AddressFormatRegistry.CentrifugeAccount,
    AddressFormatRegistry.CereAccount,
    AddressFormatRegistry.CessAccount,
    AddressFormatRegistry.CessTestnetAccount,
    AddressFormatRegistry.ChainflipAccount,
    AddressFormatRegistry.ChainxAccount,
    AddressFormatRegistry.CloverAccount,
    AddressFormatRegistry.ComposableAccount,
    AddressFormatRegistry.ContextfreeAccount,
    AddressFormatRegistry.CordAccount,
    AddressFormatRegistry.CrustAccount,
    AddressFormatRegistry.DarkAccount,
    AddressFormatRegistry.DarwiniaAccount,
    AddressFormatRegistry.DatahighwayAccount,
    AddressFormatRegistry.DentnetAccount,
    AddressFormatRegistry.DockMainnetAccount,
    AddressFormatRegistry.DockTestnetAccount,
    AddressFormatRegistry.EdgewareAccount,
    AddressFormatRegistry.EfinityAccount,
    AddressFormatRegistry.EquilibriumAccount,
    AddressFormatRegistry.G1Account,
    AddressFormatRegistry.GeekAccount,
    AddressFormatRegistry.GenshiroAccount,
    AddressFormatRegistry.GmAccount,
    AddressFormatRegistry.GoroAccount,
    AddressFormatRegistry.HashedAccount,
    AddressFormatRegistry.HeikoAccount,
    AddressFormatRegistry.HumanodeAccount,
    AddressFormatRegistry.HydradxAccount,
    AddressFormatRegistry.ImpactAccount,
    AddressFormatRegistry.IntegriteeAccount,
    AddressFormatRegistry.IntegriteeIncognitoAccount,
    AddressFormatRegistry.InterlayAccount,
    AddressFormatRegistry.JupiterAccount,
    AddressFormatRegistry.KabochaAccount,
    AddressFormatRegistry.KapexAccount,
    AddressFormatRegistry.KaruraAccount,
    AddressFormatRegistry.KatalchainAccount,
    AddressFormatRegistry.KiltAccount,
    AddressFormatRegistry.KintsugiAccount,
    AddressFormatRegistry.KulupuAccount,
    AddressFormatRegistry.KusamaAccount,
    AddressFormatRegistry.LaminarAccount,
    AddressFormatRegistry.LitentryAccount,
    AddressFormatRegistry.LitmusAccount,
    AddressFormatRegistry.MantaAccount,
    AddressFormatRegistry.MathchainAccount,
    AddressFormatRegistry.MathchainTestnetAccount,
    AddressFormatRegistry.MoonbeamAccount,
    AddressFormatRegistry.MoonriverAccount,
    AddressFormatRegistry.MosaicChainAccount,
    AddressFormatRegistry.MythosAccount,
    AddressFormatRegistry.NeatcoinAccount,
    AddressFormatRegistry.NftmartAccount,
    AddressFormatRegistry.NodleAccount,
    AddressFormatRegistry.OakAccount,
    AddressFormatRegistry.OrigintrailParachainAccount,
    AddressFormatRegistry.ParallelAccount,
    AddressFormatRegistry.PeaqAccount,
    AddressFormatRegistry.PhalaAccount,
    AddressFormatRegistry.PicassoAccount,
    AddressFormatRegistry.PioneerNetworkAccount,
    AddressFormatRegistry.PoliAccount,
    AddressFormatRegistry.PolkadexAccount,
    AddressFormatRegistry.PolkadotAccount,
    AddressFormatRegistry.PolkafoundryAccount,
    AddressFormatRegistry.PolkasmithAccount,
    AddressFormatRegistry.PolymeshAccount,
    AddressFormatRegistry.PontemNetworkAccount,
    AddressFormatRegistry.QuartzMainnetAccount,
    AddressFormatRegistry.Reserved46Account,
    AddressFormatRegistry.Reserved47Account,
    AddressFormatRegistry.ReynoldsAccount,
    AddressFormatRegistry.RobonomicsAccount,
    AddressFormatRegistry.SapphireMainnetAccount,
    AddressFormatRegistry.ShiftAccount,
    AddressFormatRegistry.SocialNetworkAccount,
    AddressFormatRegistry.SoraAccount,
    AddressFormatRegistry.SoraKusamaParaAccount,
    AddressFormatRegistry.StafiAccount,
    AddressFormatRegistry.SubsocialAccount,
    AddressFormatRegistry.SubspaceAccount,
    AddressFormatRegistry.SubspaceTestnetAccount,
    AddressFormatRegistry.SubstrateAccount,
    AddressFormatRegistry.SynesthesiaAccount,
    AddressFormatRegistry.T3rnAccount,
    AddressFormatRegistry.TernoaAccount,
    AddressFormatRegistry.TidefiAccount,
    AddressFormatRegistry.TinkerAccount,
    AddressFormatRegistry.TotemAccount,
    AddressFormatRegistry.UniartsAccount,
    AddressFormatRegistry.UniqueMainnetAccount,
    AddressFormatRegistry.VlnAccount,
    AddressFormatRegistry.XxnetworkAccount,
    AddressFormatRegistry.ZeitgeistAccount,
    AddressFormatRegistry.ZeroAccount,
    AddressFormatRegistry.ZeroAlphavilleAccount,
)

#: Network names of all known address formats (sorted by network name)
ALL_NAMES = (
    'BareEd25519',
    'BareSecp256k1',
    'BareSr25519',
    'DICO',
    'KICO',
    'SNOW',
    'Turing',
    'acala',
    'ajuna',
    'altair',
    'analog-timechain',
    'ares',
    'astar',
    'aventus',
    'bajun',
    'basilisk',
    'bifrost',
    'bitgreen',
    'calamari',
    'centrifuge',
    'cere',
    'cess',
    'cess-testnet',
    'chainflip',
    'chainx',
    'clover',
    'composable',
    'contextfree',
    'cord',
    'crust',
    'dark',
    'darwinia',
    'datahighway',
    'dentnet',
    'dock-mainnet',
    'dock-testnet',
    'edgeware',
    'efinity',
    'equilibrium',
    'g1',
    'geek',
    'genshiro',
    'gm',
    'goro',
    'hashed',
    'heiko',
    'humanode',
    'hydradx',
    'impact',
    'integritee',
    'integritee-incognito',
    'interlay',
    'jupiter',
    'kabocha',
    'kapex',
    'karura',
    'katalchain',
    'kilt',
    'kintsugi',
    'kulupu',
    'kusama',
    'laminar',
    'litentry',
    'litmus',
    'manta',
    'mathchain',
    'mathchain-testnet',
    'moonbeam',
    'moonriver',
    'mosaic-chain',
    'mythos',
    'neatcoin',
    'nftmart',
    'nodle',
    'oak',
    'origintrail-parachain',
    'parallel',
    'peaq',
    'phala',
    'picasso',
    'pioneer_network',
    'poli',
    'polkadex',
    'polkadot',
    'polkafoundry',
    'polkasmith',
    'polymesh',
    'pontem-network',
    'quartz_mainnet',
    'reserved46',
    'reserved47',
    'reynolds',
    'robonomics',
    'sapphire_mainnet',
    'shift',
    'social-network',
    'sora',
    'sora_kusama_para',
    'stafi',
    'subsocial',
    'subspace',
    'subspace_testnet',
    'substrate',
    'synesthesia',
    't3rn',
    'ternoa',
    'tidefi',
    'tinker',
    'totem',
    'uniarts',
    'unique_mainnet',
    'vln',
    'xxnetwork',
    'zeitgeist',
    'zero',
    'zero-alphaville',
)

#: (prefix, index into ALL_FORMATS), sorted by prefix
PREFIX_TO_INDEX = (
    (0, 83),
    (1, 2),
    (2, 60),
    (3, 0),
    (4, 56),
    (5, 12),
    (6, 16),
    (7, 36),
    (8, 55),
    (9, 91),
    (10, 7),
    (11, 61),
    (12, 86),
    (13, 49),
    (14, 108),
    (15, 103),
    (16, 59),
    (17, 30),
    (18, 31),
    (19, 40),
    (20, 98),
    (21, 35),
    (22, 34),
    (23, 94),
    (24, 114),
    (25, 115),
    (26, 52),
    (27, 53),
    (28, 99),
    (29, 28),
    (30, 78),
    (31, 62),
    (32, 92),
    (33, 32),
    (34, 11),
    (35, 111),
    (36, 19),
    (37, 73),
    (38, 57),
    (39, 65),
    (40, 66),
    (41, 81),
    (42, 102),
    (43, 1),
    (44, 24),
    (45, 109),
    (46, 89),
    (47, 90),
    (48, 71),
    (49, 79),
    (50, 26),
    (51, 74),
    (52, 4),
    (53, 3),
    (54, 20),
    (55, 112),
    (63, 47),
    (65, 13),
    (66, 29),
    (67, 41),
    (68, 38),
    (69, 96),
    (73, 113),
    (77, 64),
    (78, 18),
    (89, 82),
    (90, 85),
    (92, 58),
    (98, 84),
    (101, 75),
    (105, 87),
    (110, 45),
    (113, 50),
    (117, 107),
    (128, 25),
    (131, 63),
    (136, 9),
    (172, 76),
    (252, 95),
    (255, 88),
    (268, 80),
    (420, 97),
    (777, 22),
    (995, 105),
    (1110, 37),
    (1221, 77),
    (1284, 67),
    (1285, 68),
    (1328, 8),
    (1337, 14),
    (2007, 54),
    (2032, 51),
    (2106, 17),
    (2112, 23),
    (2114, 6),
    (2207, 5),
    (2254, 101),
    (4450, 39),
    (5234, 46),
    (6094, 100),
    (7007, 106),
    (7013, 42),
    (7391, 110),
    (8883, 93),
    (9072, 44),
    (9807, 33),
    (9935, 104),
    (10041, 15),
    (11330, 21),
    (11820, 27),
    (12155, 48),
    (12191, 72),
    (12850, 10),
    (14697, 43),
    (14998, 69),
    (29972, 70),
)

#: Prefixes reserved for future use
RESERVED_PREFIXES = frozenset((
    46,
    47,
))

#: Known prefixes as inclusive ranges RUN_STARTS[k]..RUN_ENDS[k]
RUN_STARTS = (
    0,
    63,
    65,
    73,
    77,
    89,
    92,
    98,
    101,
    105,
    110,
    113,
    117,
    128,
    131,
    136,
    172,
    252,
    255,
    268,
    420,
    777,
    995,
    1110,
    1221,
    1284,
    1328,
    1337,
    2007,
    2032,
    2106,
    2112,
    2114,
    2207,
    2254,
    4450,
    5234,
    6094,
    7007,
    7013,
    7391,
    8883,
    9072,
    9807,
    9935,
    10041,
    11330,
    11820,
    12155,
    12191,
    12850,
    14697,
    14998,
    29972,
)
RUN_ENDS = (
    55,
    63,
    69,
    73,
    78,
    90,
    92,
    98,
    101,
    105,
    110,
    113,
    117,
    128,
    131,
    136,
    172,
    252,
    255,
    268,
    420,
    777,
    995,
    1110,
    1221,
    1285,
    1328,
    1337,
    2007,
    2032,
    2106,
    2112,
    2114,
    2207,
    2254,
    4450,
    5234,
    6094,
    7007,
    7013,
    7391,
    8883,
    9072,
    9807,
    9935,
    10041,
    11330,
    11820,
    12155,
    12191,
    12850,
    14697,
    14998,
    29972,
)

#: Tokens of each known address format, in declaration order
TOKENS = {
    AddressFormatRegistry.BareEd25519Account: (),
    AddressFormatRegistry.BareSecp256k1Account: (),
    AddressFormatRegistry.BareSr25519Account: (),
    AddressFormatRegistry.DicoAccount: (TokenRegistry.Dico,),
    AddressFormatRegistry.KicoAccount: (TokenRegistry.Kico,),
    AddressFormatRegistry.SnowAccount: (TokenRegistry.Icz,),
    AddressFormatRegistry.TuringAccount: (TokenRegistry.Tur,),
    AddressFormatRegistry.AcalaAccount: (TokenRegistry.Aca,),
    AddressFormatRegistry.AjunaAccount: (TokenRegistry.Ajun,),
    AddressFormatRegistry.AltairAccount: (TokenRegistry.Air,),
    AddressFormatRegistry.AnalogTimechainAccount: (TokenRegistry.Anlog,),
    AddressFormatRegistry.AresAccount: (TokenRegistry.Ares,),
    AddressFormatRegistry.AstarAccount: (TokenRegistry.Astr,),
    AddressFormatRegistry.AventusAccount: (TokenRegistry.Avt,),
    AddressFormatRegistry.BajunAccount: (TokenRegistry.Baju,),
    AddressFormatRegistry.BasiliskAccount: (TokenRegistry.Bsx,),
    AddressFormatRegistry.BifrostAccount: (TokenRegistry.Bnc,),
    AddressFormatRegistry.BitgreenAccount: (TokenRegistry.Bbb,),
    AddressFormatRegistry.CalamariAccount: (TokenRegistry.Kma,),
    AddressFormatRegistry.CentrifugeAccount: (TokenRegistry.Cfg,),
    AddressFormatRegistry.CereAccount: (TokenRegistry.Cere,),
    AddressFormatRegistry.CessAccount: (TokenRegistry.Cess,),
    AddressFormatRegistry.CessTestnetAccount: (TokenRegistry.Tcess,),
    AddressFormatRegistry.ChainflipAccount: (TokenRegistry.Flip,),
    AddressFormatRegistry.ChainxAccount: (TokenRegistry.Pcx,),
    AddressFormatRegistry.CloverAccount: (TokenRegistry.Clv,),
    AddressFormatRegistry.ComposableAccount: (TokenRegistry.Layr,),
    AddressFormatRegistry.ContextfreeAccount: (TokenRegistry.Ctx18,),
    AddressFormatRegistry.CordAccount: (TokenRegistry.Dhi,),
    AddressFormatRegistry.CrustAccount: (TokenRegistry.Cru,),
    AddressFormatRegistry.DarkAccount: (),
    AddressFormatRegistry.DarwiniaAccount: (TokenRegistry.Ring, TokenRegistry.Kton),
    AddressFormatRegistry.DatahighwayAccount: (),
    AddressFormatRegistry.DentnetAccount: (TokenRegistry.Dentx,),
    AddressFormatRegistry.DockMainnetAccount: (TokenRegistry.Dck,),
    AddressFormatRegistry.DockTestnetAccount: (TokenRegistry.Dck,),
    AddressFormatRegistry.EdgewareAccount: (TokenRegistry.Edg,),
    AddressFormatRegistry.EfinityAccount: (TokenRegistry.Efi,),
    AddressFormatRegistry.EquilibriumAccount: (TokenRegistry.Eq,),
    AddressFormatRegistry.G1Account: (TokenRegistry.G1,),
    AddressFormatRegistry.GeekAccount: (TokenRegistry.Geek,),
    AddressFormatRegistry.GenshiroAccount: (TokenRegistry.Gens, TokenRegistry.Eqd, TokenRegistry.Lpt0, TokenRegistry.Lpt1),
    AddressFormatRegistry.GmAccount: (TokenRegistry.Fren, TokenRegistry.Gm, TokenRegistry.Gn),
    AddressFormatRegistry.GoroAccount: (TokenRegistry.Goro,),
    AddressFormatRegistry.HashedAccount: (TokenRegistry.Hash,),
    AddressFormatRegistry.HeikoAccount: (),
    AddressFormatRegistry.HumanodeAccount: (TokenRegistry.Hmnd,),
    AddressFormatRegistry.HydradxAccount: (TokenRegistry.Hdx,),
    AddressFormatRegistry.ImpactAccount: (TokenRegistry.Bsty,),
    AddressFormatRegistry.IntegriteeAccount: (TokenRegistry.Teer,),
    AddressFormatRegistry.IntegriteeIncognitoAccount: (),
    AddressFormatRegistry.InterlayAccount: (TokenRegistry.Intr, TokenRegistry.Ibtc, TokenRegistry.Dot),
    AddressFormatRegistry.JupiterAccount: (TokenRegistry.JDot,),
    AddressFormatRegistry.KabochaAccount: (TokenRegistry.Kab,),
    AddressFormatRegistry.KapexAccount: (TokenRegistry.Kapex,),
    AddressFormatRegistry.KaruraAccount: (TokenRegistry.Kar,),
    AddressFormatRegistry.KatalchainAccount: (),
    AddressFormatRegistry.KiltAccount: (TokenRegistry.Kilt,),
    AddressFormatRegistry.KintsugiAccount: (TokenRegistry.Kint, TokenRegistry.Kbtc, TokenRegistry.Ksm),
    AddressFormatRegistry.KulupuAccount: (TokenRegistry.Klp,),
    AddressFormatRegistry.KusamaAccount: (TokenRegistry.Ksm,),
    AddressFormatRegistry.LaminarAccount: (TokenRegistry.Lami,),
    AddressFormatRegistry.LitentryAccount: (TokenRegistry.Lit,),
    AddressFormatRegistry.LitmusAccount: (TokenRegistry.Lit,),
    AddressFormatRegistry.MantaAccount: (TokenRegistry.Manta,),
    AddressFormatRegistry.MathchainAccount: (TokenRegistry.Math,),
    AddressFormatRegistry.MathchainTestnetAccount: (TokenRegistry.Math,),
    AddressFormatRegistry.MoonbeamAccount: (TokenRegistry.Glmr,),
    AddressFormatRegistry.MoonriverAccount: (TokenRegistry.Movr,),
    AddressFormatRegistry.MosaicChainAccount: (TokenRegistry.Mos,),
    AddressFormatRegistry.MythosAccount: (TokenRegistry.Myth,),
    AddressFormatRegistry.NeatcoinAccount: (TokenRegistry.Neat,),
    AddressFormatRegistry.NftmartAccount: (TokenRegistry.Nmt,),
    AddressFormatRegistry.NodleAccount: (TokenRegistry.Nodl,),
    AddressFormatRegistry.OakAccount: (TokenRegistry.Oak,),
    AddressFormatRegistry.OrigintrailParachainAccount: (TokenRegistry.Otp,),
    AddressFormatRegistry.ParallelAccount: (),
    AddressFormatRegistry.PeaqAccount: (),
    AddressFormatRegistry.PhalaAccount: (TokenRegistry.Pha,),
    AddressFormatRegistry.PicassoAccount: (TokenRegistry.Pica,),
    AddressFormatRegistry.PioneerNetworkAccount: (TokenRegistry.Neer,),
    AddressFormatRegistry.PoliAccount: (),
    AddressFormatRegistry.PolkadexAccount: (TokenRegistry.Pdex,),
    AddressFormatRegistry.PolkadotAccount: (TokenRegistry.Dot,),
    AddressFormatRegistry.PolkafoundryAccount: (TokenRegistry.Pkf,),
    AddressFormatRegistry.PolkasmithAccount: (TokenRegistry.Pks,),
    AddressFormatRegistry.PolymeshAccount: (TokenRegistry.Polyx,),
    AddressFormatRegistry.PontemNetworkAccount: (TokenRegistry.Nom,),
    AddressFormatRegistry.QuartzMainnetAccount: (TokenRegistry.Qtz,),
    AddressFormatRegistry.Reserved46Account: (),
    AddressFormatRegistry.Reserved47Account: (),
    AddressFormatRegistry.ReynoldsAccount: (TokenRegistry.Rey,),
    AddressFormatRegistry.RobonomicsAccount: (TokenRegistry.Xrt,),
    AddressFormatRegistry.SapphireMainnetAccount: (TokenRegistry.Qtz,),
    AddressFormatRegistry.ShiftAccount: (),
    AddressFormatRegistry.SocialNetworkAccount: (TokenRegistry.Net,),
    AddressFormatRegistry.SoraAccount: (TokenRegistry.Xor,),
    AddressFormatRegistry.SoraKusamaParaAccount: (TokenRegistry.Xor,),
    AddressFormatRegistry.StafiAccount: (TokenRegistry.Fis,),
    AddressFormatRegistry.SubsocialAccount: (),
    AddressFormatRegistry.SubspaceAccount: (TokenRegistry.Ssc,),
    AddressFormatRegistry.SubspaceTestnetAccount: (TokenRegistry.TSsc,),
    AddressFormatRegistry.SubstrateAccount: (),
    AddressFormatRegistry.SynesthesiaAccount: (TokenRegistry.Syn,),
    AddressFormatRegistry.T3rnAccount: (TokenRegistry.Trn,),
    AddressFormatRegistry.TernoaAccount: (TokenRegistry.Caps,),
    AddressFormatRegistry.TidefiAccount: (TokenRegistry.Tdfy,),
    AddressFormatRegistry.TinkerAccount: (TokenRegistry.Tnkr,),
    AddressFormatRegistry.TotemAccount: (TokenRegistry.Ctx0,),
    AddressFormatRegistry.UniartsAccount: (TokenRegistry.Uart, TokenRegistry.Uink),
    AddressFormatRegistry.UniqueMainnetAccount: (TokenRegistry.Unq,),
    AddressFormatRegistry.VlnAccount: (TokenRegistry.UsDv,),
    AddressFormatRegistry.XxnetworkAccount: (TokenRegistry.Xx,),
    AddressFormatRegistry.ZeitgeistAccount: (TokenRegistry.Ztg,),
    AddressFormatRegistry.ZeroAccount: (TokenRegistry.Zero,),
    AddressFormatRegistry.ZeroAlphavilleAccount: (TokenRegistry.Zero,),
}
