"""
amlich.tables.year_codes
------------------------
Packed lunar-year codes, one tuple per century (TK13 = 1200..1299, ...).

Generated by ``amlich year-codes`` (see amlich.design.year_codes) for the
UTC+7 meridian. Layout of each code is documented in amlich.engines.year_code.
"""

from __future__ import annotations

from typing import Dict, Tuple

TK13 = (
    0x225b54, 0x464ba0, 0x30a5b0, 0x1c6572, 0x4252b0, 0x2a6aa6, 0x4ee950, 0x3a6aa0, 0x25aaa5, 0x489b50,
    0x344b60, 0x1eaae3, 0x44a4e0, 0x2cd2d7, 0x52d260, 0x3cd520, 0x26dd55, 0x4c56a0, 0x3696d0, 0x2255d3,
    0x4849d0, 0x30a4d0, 0x1ae4d2, 0x40b250, 0x2ab656, 0x4ead40, 0x38b5a0, 0x249ba4, 0x4a95b0, 0x3449b0,
    0x1ea973, 0x44a4b0, 0x2eaab7, 0x526a50, 0x3c6d40, 0x26af46, 0x4cab60, 0x369370, 0x2342f4, 0x484970,
    0x3264b0, 0x1b54a2, 0x3eda50, 0x2b5956, 0x5056c0, 0x38aae0, 0x2495d4, 0x4a92e0, 0x34c960, 0x1dc953,
    0x42d4a0, 0x2cd9a8, 0x52b550, 0x3c56a0, 0x27a5b5, 0x4e25d0, 0x3892b0, 0x21a2b4, 0x46a950, 0x30b4a0,
    0x1aeaa1, 0x3ead50, 0x2a5756, 0x504ba0, 0x3aa5b0, 0x245575, 0x4a5270, 0x346930, 0x1e7553, 0x426aa0,
    0x2caba8, 0x529750, 0x3e4b60, 0x27a2e5, 0x4ca4e0, 0x36d260, 0x21e264, 0x44d520, 0x2edaa0, 0x1a76a2,
    0x4056d0, 0x2b49d6, 0x5049d0, 0x3aa2d0, 0x24d4b5, 0x48aa50, 0x32b520, 0x1dcd43, 0x42ada0, 0x2d55a8,
    0x5293b0, 0x3e49b0, 0x28a575, 0x4ca4b0, 0x36aa50, 0x20ba54, 0x466b20, 0x2ead60, 0x1a6b62, 0x409370,
)

TK14 = (
    0x2c4af6, 0x504970, 0x3a54b0, 0x246ca5, 0x48da50, 0x325aa0, 0x1cb6c3, 0x42a6e0, 0x2e52fb, 0x5292e0,
    0x3cc960, 0x26d556, 0x4cd4a0, 0x34d550, 0x215554, 0x4655a0, 0x30a6d0, 0x1a65d2, 0x4052b0, 0x2aaab6,
    0x50a950, 0x38b2a0, 0x23b2a5, 0x48ad50, 0x344da0, 0x1caba3, 0x42a570, 0x2f5177, 0x545170, 0x3c6930,
    0x276936, 0x4c5aa0, 0x36ab50, 0x2126d4, 0x464b60, 0x30a570, 0x1c62e2, 0x3ed160, 0x28e666, 0x4ed520,
    0x38daa0, 0x225ea5, 0x4856d0, 0x342ae0, 0x1ea5d3, 0x42a2d0, 0x2cd1b8, 0x52aa50, 0x3cb520, 0x25d526,
    0x4aada0, 0x3655d0, 0x2323b4, 0x4645b0, 0x30a2b0, 0x1ab2b3, 0x40a950, 0x29b457, 0x4e6aa0, 0x38ad60,
    0x255365, 0x484b70, 0x344570, 0x1e6573, 0x4452b0, 0x2c69a8, 0x50d950, 0x3c5aa0, 0x26aea5, 0x4aa6d0,
    0x364ae0, 0x20aae4, 0x46a560, 0x2ed2a0, 0x18f2a3, 0x3ed550, 0x2a5757, 0x4e55a0, 0x3895d0, 0x244dd5,
    0x4a49b0, 0x32a4d0, 0x1cd554, 0x42b2a0, 0x2cb5a8, 0x50ad50, 0x3c2da0, 0x269766, 0x4c9570, 0x3649b0,
    0x20a974, 0x4664b0, 0x306a90, 0x199aa2, 0x3e6b50, 0x2b2ad7, 0x502ae0, 0x389370, 0x2452e5, 0x48c960,
)

TK15 = (
    0x32e4a0, 0x1af523, 0x40da90, 0x2c5adc, 0x5256d0, 0x3c2ae0, 0x2695d5, 0x4c92d0, 0x36c950, 0x1ed954,
    0x44b520, 0x2eb690, 0x1a6da2, 0x3e55b0, 0x2a27b6, 0x5025b0, 0x3a92b0, 0x22aab5, 0x486950, 0x3274a0,
    0x1cbaa4, 0x40ab50, 0x2c55b0, 0x184b71, 0x3e2570, 0x275176, 0x4c52b0, 0x366950, 0x216554, 0x445aa0,
    0x2eab50, 0x1a56d2, 0x404ae0, 0x29a4e7, 0x4ea4d0, 0x38d260, 0x22daa5, 0x46b550, 0x3256a0, 0x1cb5a3,
    0x4295d0, 0x2c4afa, 0x5249b0, 0x3ca4d0, 0x27d0b6, 0x4ab290, 0x34b550, 0x205d54, 0x462da0, 0x2e95b0,
    0x1a5373, 0x404970, 0x2aa577, 0x4e64b0, 0x386a50, 0x236a95, 0x486b50, 0x322b60, 0x1c9ae4, 0x429370,
    0x2e4970, 0x174962, 0x3ad4a0, 0x25e8a6, 0x4ada90, 0x345ad0, 0x2126d4, 0x4626e0, 0x3092e0, 0x18d2d3,
    0x3ec950, 0x28d557, 0x4eb4a0, 0x36b550, 0x2355a5, 0x4855b0, 0x3425d0, 0x1c95b4, 0x4292b0, 0x2ca9b8,
    0x526950, 0x3a6ca0, 0x24b6a6, 0x4aab50, 0x364bb0, 0x202b64, 0x44a570, 0x3052b0, 0x1ab2a3, 0x3ce950,
    0x286b57, 0x4e5aa0, 0x38ab50, 0x224ed5, 0x484ae0, 0x32a560, 0x1cd4d4, 0x40d260, 0x2ad95c, 0x50b550,
)

TK16 = (
    0x3c56a0, 0x2595a6, 0x4a95d0, 0x364ad0, 0x20a9b4, 0x44a4d0, 0x2ed250, 0x19ca53, 0x3eb550, 0x283757,
    0x4e2da0, 0x3895b0, 0x244b75, 0x484970, 0x32a4b0, 0x1cb4b4, 0x426a50, 0x2a6d5b, 0x505b50, 0x3c2b60,
    0x2696e6, 0x4a92f0, 0x364970, 0x206964, 0x44d4a0, 0x2cea50, 0x187653, 0x3e5ad0, 0x2a2bd8, 0x4e26e0,
    0x3892e0, 0x22cad5, 0x48c950, 0x30d4a0, 0x1bd4a4, 0x40b550, 0x2c56a0, 0x14d5b1, 0x3c25d0, 0x2791b6,
    0x4c92b0, 0x34a950, 0x1fb155, 0x446ca0, 0x2ead50, 0x194b53, 0x3e4ba0, 0x29a567, 0x4ea570, 0x3852b0,
    0x226aa5, 0x46e950, 0x326aa0, 0x1baaa4, 0x409b50, 0x2c4b60, 0x178ae2, 0x3aa4e0, 0x25d0d6, 0x4ad260,
    0x34d530, 0x1e5d55, 0x4456a0, 0x2e96d0, 0x1a55d3, 0x3e4ad0, 0x28a5b7, 0x4ea4d0, 0x38d250, 0x20d656,
    0x46b540, 0x30b5a0, 0x1c9da4, 0x4095b0, 0x2c49b0, 0x178972, 0x3ca4b0, 0x24b2b7, 0x4a6a50, 0x346d40,
    0x1fab55, 0x442b60, 0x2e9370, 0x2e52f3, 0x544970, 0x3c6567, 0x60d4a0, 0x4aea50, 0x366e55, 0x5a56c0,
    0x44aae0, 0x3095d4, 0x5692e0, 0x3ec960, 0x28e952, 0x4ed4a0, 0x38daa7, 0x5cb550, 0x4856a0, 0x32adb4,
)

TK17 = (
    0x5a25d0, 0x4292d0, 0x2cb2b3, 0x52a950, 0x3cb557, 0x606aa0, 0x4aad50, 0x365756, 0x5c4ba0, 0x44a5b0,
    0x305574, 0x565270, 0x406930, 0x296952, 0x4e6aa0, 0x38aea6, 0x5e9b50, 0x484b60, 0x32aae4, 0x58a4e0,
    0x42d260, 0x2af263, 0x50d520, 0x3bda48, 0x60d6a0, 0x4a96d0, 0x364dd5, 0x5c49d0, 0x46a4d0, 0x2ed4b4,
    0x54b250, 0x3eb520, 0x28f542, 0x4cb5a0, 0x3857a6, 0x5e95b0, 0x4a49b0, 0x33a175, 0x58a4b0, 0x42aa50,
    0x2cba54, 0x506d20, 0x3aadab, 0x60ab60, 0x4c9370, 0x364af5, 0x5c4970, 0x4664b0, 0x3164a4, 0x52da50,
    0x3e5aa0, 0x28d6c1, 0x4eaae0, 0x3991d6, 0x5e92e0, 0x48c960, 0x33d155, 0x56d4a0, 0x40d950, 0x2d5553,
    0x5256a0, 0x3ba6a8, 0x60a5d0, 0x4c52b0, 0x36aab6, 0x5aa950, 0x44b4a0, 0x2ebaa4, 0x54ad50, 0x3e55a0,
    0x298ba2, 0x4ea5b0, 0x3a5377, 0x5e5270, 0x486930, 0x326d35, 0x586aa0, 0x40ab50, 0x2c5b53, 0x524b60,
    0x3ca5e8, 0x60a2e0, 0x4ad160, 0x34ea66, 0x5ad520, 0x42daa0, 0x2f56a4, 0x5456d0, 0x404ae0, 0x28a9d3,
    0x4ea2d0, 0x38d2b6, 0x5eaa50, 0x46b520, 0x31d525, 0x56ada0, 0x4255d0, 0x2c55b3, 0x5249b0, 0x3ca377,
)

TK18 = (
    0x6262b0, 0x4caa50, 0x36b656, 0x5c6b20, 0x46ad60, 0x305b64, 0x565370, 0x424970, 0x2c6573, 0x5052b0,
    0x3a6aa7, 0x5eda50, 0x4a5aa0, 0x32aea5, 0x58a6d0, 0x4452e0, 0x2ed2e3, 0x52a950, 0x3dd458, 0x62d2a0,
    0x4cd550, 0x375956, 0x5c56a0, 0x46a6d0, 0x3255d4, 0x5652b0, 0x40a8d0, 0x2bc953, 0x50b2a0, 0x39b4a7,
    0x5ead50, 0x4a4da0, 0x359365, 0x58a570, 0x4451b0, 0x2fa174, 0x5464b0, 0x3c6ab9, 0x626aa0, 0x4c6b50,
    0x392ad6, 0x5c2b60, 0x46a570, 0x3252e4, 0x56d160, 0x3ee4a0, 0x28f523, 0x4eda90, 0x3b5aa7, 0x5e56d0,
    0x4a2ae0, 0x34a5d5, 0x5aa2d0, 0x42d150, 0x2cd954, 0x52b520, 0x3cb6a9, 0x60ada0, 0x4c55b0, 0x382bb6,
    0x5e45b0, 0x46a2b0, 0x30aab5, 0x566950, 0x40b4a0, 0x29aaa2, 0x4ead50, 0x3b5567, 0x604b70, 0x4a2570,
    0x345575, 0x5a52b0, 0x446950, 0x2c7953, 0x525aa0, 0x3cab6a, 0x62a6d0, 0x4c4ae0, 0x36a6e6, 0x5ca4d0,
    0x46d2a0, 0x2eeaa5, 0x54d550, 0x405aa0, 0x2ab5a3, 0x4e95d0, 0x3a4bb7, 0x604ab0, 0x4aa4d0, 0x32d4b5,
    0x58b290, 0x42b550, 0x2e5d54, 0x522da0, 0x3c95b0, 0x285572, 0x4e49b0, 0x36a576, 0x5c64b0, 0x466a90,
)

TK19 = (
    0x31aa94, 0x566b50, 0x422b60, 0x2cab62, 0x529370, 0x3d48e7, 0x60c960, 0x4ae4a0, 0x34eca5, 0x58da90,
    0x445ad0, 0x3036d3, 0x562ae0, 0x3e92e0, 0x28d2d2, 0x4ec950, 0x38d556, 0x5cb4a0, 0x46b690, 0x325da4,
    0x5855b0, 0x4225d0, 0x2d85b3, 0x5292b0, 0x3da8b7, 0x606950, 0x4a74a0, 0x35b2a5, 0x5aab50, 0x4455b0,
    0x302b74, 0x562570, 0x4052f9, 0x6452b0, 0x4e6950, 0x386d56, 0x5e5aa0, 0x46ab50, 0x3346d4, 0x584ae0,
    0x42a570, 0x2d44d3, 0x50d260, 0x3bd8a7, 0x60b550, 0x4a56a0, 0x349da5, 0x5a95d0, 0x464ad0, 0x2ea9b4,
    0x54a4d0, 0x3ed2b8, 0x64aa50, 0x4cb550, 0x383757, 0x5e2da0, 0x4895b0, 0x324b75, 0x584970, 0x42a4b0,
    0x2da4b3, 0x506a50, 0x3a6d98, 0x605b50, 0x4c2b60, 0x3592e5, 0x5a92f0, 0x464970, 0x306964, 0x52d4a0,
    0x3cea6a, 0x62da90, 0x4e5ad0, 0x392ad6, 0x5e26e0, 0x4892e0, 0x32cad5, 0x56c950, 0x40d4a0, 0x2bd4a3,
    0x50b550, 0x3a5757, 0x6055b0, 0x4c25d0, 0x3695b5, 0x5a92b0, 0x44a950, 0x2eb954, 0x546ca0, 0x3cb550,
    0x286b52, 0x4e4da0, 0x38a766, 0x5ca570, 0x4852b0, 0x326aa5, 0x56e950, 0x406aa0, 0x2abaa3, 0x50ab50,
)

TK20 = (
    0x3c4bd8, 0x624ae0, 0x4ca560, 0x36d4d5, 0x5cd260, 0x44d930, 0x315554, 0x5656a0, 0x4096d0, 0x2a55d2,
    0x504ad0, 0x3aa5b6, 0x60a4d0, 0x48d250, 0x33d255, 0x58b540, 0x42b6a0, 0x2d8da3, 0x5295b0, 0x3f4977,
    0x644970, 0x4ca4b0, 0x37b0b6, 0x5c6a50, 0x466d40, 0x2fab54, 0x562b60, 0x409570, 0x2c52f2, 0x504970,
    0x3a6566, 0x5ed4a0, 0x48ea50, 0x326e55, 0x585ac0, 0x42ab60, 0x2f86d3, 0x5292e0, 0x3cc9d8, 0x62a950,
    0x4cd4a0, 0x35d8a6, 0x5ab550, 0x4656a0, 0x31a5b4, 0x5625d0, 0x4092d0, 0x2b92b2, 0x50a950, 0x38b557,
    0x5e6aa0, 0x48ad50, 0x355355, 0x584ba0, 0x42a5b0, 0x2f4573, 0x545270, 0x3c6968, 0x60e950, 0x4c6aa0,
    0x36aea6, 0x5a9b50, 0x464b60, 0x30aae4, 0x56a4e0, 0x3ed260, 0x28f263, 0x4ed920, 0x38db47, 0x5cd6a0,
    0x4896d0, 0x344dd5, 0x5a4ad0, 0x42a4d0, 0x2cd4b4, 0x52b250, 0x3cd558, 0x60b540, 0x4ab5a0, 0x3755a6,
    0x5c95b0, 0x4649b0, 0x30a974, 0x56a4b0, 0x40aa50, 0x29aa52, 0x4e6d20, 0x39ad47, 0x5eab60, 0x489370,
    0x344af5, 0x5a4970, 0x4464b0, 0x2c74a3, 0x50ea50, 0x3d6a58, 0x6256a0, 0x4aaad0, 0x3696d5, 0x5c92e0,
)

TK21 = (
    0x46c960, 0x2ed954, 0x54d4a0, 0x3eda50, 0x2a7552, 0x4e56a0, 0x38a7a7, 0x5ea5d0, 0x4a92b0, 0x32aab5,
    0x58a950, 0x42b4a0, 0x2cbaa4, 0x50ad50, 0x3c55d9, 0x624ba0, 0x4ca5b0, 0x375176, 0x5c5270, 0x466930,
    0x307934, 0x546aa0, 0x3ead50, 0x2a5b52, 0x504b60, 0x38a6e6, 0x5ea4e0, 0x48d260, 0x32ea65, 0x56d520,
    0x40daa0, 0x2d56a3, 0x5256d0, 0x3c4afb, 0x6249d0, 0x4ca4d0, 0x37d0b6, 0x5ab250, 0x44b520, 0x2edd25,
    0x54b5a0, 0x3e55d0, 0x2a55b2, 0x5049b0, 0x3aa577, 0x5ea4b0, 0x48aa50, 0x33b255, 0x586d20, 0x40ad60,
    0x2d4b63, 0x525370, 0x3e49e8, 0x60c970, 0x4c64b0, 0x3768a6, 0x5ada50, 0x445aa0, 0x2fa6a4, 0x54aad0,
    0x4052e0, 0x28d2e3, 0x4ec950, 0x38d557, 0x5ed4a0, 0x46d950, 0x325d55, 0x5856a0, 0x42a6d0, 0x2c55d4,
    0x5252b0, 0x3ca9b8, 0x62a950, 0x4ab490, 0x34b6a6, 0x5aad50, 0x4655a0, 0x2eaba4, 0x54a570, 0x4052b0,
    0x2ab173, 0x4e6930, 0x386b37, 0x5e6aa0, 0x48ad50, 0x332ad5, 0x582b60, 0x42a570, 0x2e52e4, 0x50d160,
    0x3ae958, 0x60d520, 0x4ada90, 0x355aa6, 0x5a56d0, 0x462ae0, 0x30a9d4, 0x54a2d0, 0x3ed150, 0x28e952,
)

TK22 = (
    0x4eb520, 0x38d727, 0x5eada0, 0x4a55b0, 0x362db5, 0x5a45b0, 0x44a2b0, 0x2eb2b4, 0x54a950, 0x3cb559,
    0x626b20, 0x4cad50, 0x385766, 0x5c5370, 0x484570, 0x326574, 0x5852b0, 0x406950, 0x2a7953, 0x505aa0,
    0x3baaa7, 0x5ea6d0, 0x4a4ae0, 0x35a2e5, 0x5aa550, 0x42d2a0, 0x2de2a4, 0x52d550, 0x3e5abb, 0x6256a0,
    0x4ca6d0, 0x3949b6, 0x5e4ab0, 0x46a8d0, 0x30d4b5, 0x56b290, 0x40b550, 0x2a6d52, 0x504da0, 0x3b9567,
    0x609570, 0x4a49b0, 0x34a975, 0x5a64b0, 0x446a90, 0x2cba94, 0x526b50, 0x3e2b60, 0x28ab61, 0x4c9570,
    0x3852e6, 0x5cd160, 0x46e4a0, 0x2eed25, 0x54da90, 0x405b50, 0x2c36d3, 0x502ae0, 0x3a93d7, 0x60a2d0,
    0x4ac950, 0x32d556, 0x58b4a0, 0x42b690, 0x2e5d94, 0x5255b0, 0x3e25fa, 0x6425b0, 0x4e92b0, 0x36aab6,
    0x5c6950, 0x4674a0, 0x31b2a5, 0x54ad50, 0x4055b0, 0x2c2b73, 0x522570, 0x3a5377, 0x6052b0, 0x4a6950,
    0x346d56, 0x585aa0, 0x42ab50, 0x2e56d4, 0x544ae0, 0x3ca570, 0x2864d2, 0x4cd260, 0x36eaa6, 0x5ad550,
    0x465aa0, 0x30ada5, 0x5695d0, 0x404ad0, 0x2aa9b3, 0x50a4d0, 0x3ad2b7, 0x5eb250, 0x48b550, 0x355556,
)

# century index (year // 100) -> 100 codes
CENTURIES: Dict[int, Tuple[int, ...]] = {
    12: TK13,
    13: TK14,
    14: TK15,
    15: TK16,
    16: TK17,
    17: TK18,
    18: TK19,
    19: TK20,
    20: TK21,
    21: TK22,
}
