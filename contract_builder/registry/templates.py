"""MultiversX Rust source templates for the built-in contract modules."""

META_TX = """// Meta Transaction Handler for MultiversX
#[multiversx_sc::contract]
pub trait MetaTransactionModule {
    #[view(getNonce)]
    #[storage_mapper("nonce")]
    fn nonce(&self, user: &ManagedAddress) -> SingleValueMapper<u64>;

    #[endpoint(executeMetaTx)]
    fn execute_meta_tx(
        &self,
        user: ManagedAddress,
        function_call: ManagedBuffer,
        nonce: u64,
        percentage: u64,
        signature: ManagedBuffer,
    ) {
        // Verify nonce
        let user_nonce = self.nonce(&user).get();
        require!(nonce == user_nonce, "Invalid nonce");
        self.nonce(&user).set(user_nonce + 1);

        // Verify signature and execute transaction
        // Handle gas fee delegation based on percentage
    }
}"""

ESDT_TOKEN = """// ESDT Token Implementation for MultiversX
#[multiversx_sc::contract]
pub trait EsdtToken {
    #[init]
    fn init(&self) {
        // Initialize token properties
    }

    // Issue a new ESDT token
    #[only_owner]
    #[payable("EGLD")]
    #[endpoint(issueToken)]
    fn issue_token(
        &self,
        token_name: ManagedBuffer,
        token_ticker: ManagedBuffer,
        initial_supply: BigUint,
        num_decimals: usize,
        #[payment] issue_cost: BigUint
    ) {
        // Token issuance logic
    }

    // Transfer tokens to a specific address
    #[endpoint(transfer)]
    fn transfer(
        &self,
        to: ManagedAddress,
        amount: BigUint
    ) {
        // Transfer logic with MultiversX-specific optimizations
    }
}"""

ACCESS_CONTROL = """// Role-based access control for MultiversX
#[multiversx_sc::contract]
pub trait AccessControl {
    #[view(hasRole)]
    fn has_role(&self, role: &ManagedBuffer, address: &ManagedAddress) -> bool {
        self.roles(role).contains(address)
    }

    #[storage_mapper("roles")]
    fn roles(&self, role: &ManagedBuffer) -> UnorderedSetMapper<ManagedAddress>;

    #[only_owner]
    #[endpoint(grantRole)]
    fn grant_role(&self, role: ManagedBuffer, address: ManagedAddress) {
        self.roles(&role).insert(address);
    }

    #[only_owner]
    #[endpoint(revokeRole)]
    fn revoke_role(&self, role: ManagedBuffer, address: ManagedAddress) {
        self.roles(&role).remove(&address);
    }
}"""

BRIDGE_ADAPTER = """// MultiversX Bridge Adapter
#[multiversx_sc::contract]
pub trait BridgeAdapter {
    #[init]
    fn init(
        &self,
        eth_bridge_address: ManagedAddress,
        mx_bridge_address: ManagedAddress
    ) {
        self.eth_bridge_address().set(eth_bridge_address);
        self.mx_bridge_address().set(mx_bridge_address);
    }

    #[storage_mapper("ethBridgeAddress")]
    fn eth_bridge_address(&self) -> SingleValueMapper<ManagedAddress>;

    #[storage_mapper("mxBridgeAddress")]
    fn mx_bridge_address(&self) -> SingleValueMapper<ManagedAddress>;

    #[payable("ESDT")]
    #[endpoint(bridgeToEthereum)]
    fn bridge_to_ethereum(
        &self,
        eth_address: ManagedBuffer,
        #[payment_token] token_id: TokenIdentifier,
        #[payment_amount] amount: BigUint
    ) {
        // Bridge implementation logic
    }
}"""

GAS_OPTIMIZER = """// MultiversX Gas Optimizer
#[multiversx_sc::contract]
pub trait GasOptimizer {
    // Cache commonly used values
    #[storage_mapper("cachedValues")]
    fn cached_values(&self, key: &ManagedBuffer) -> SingleValueMapper<ManagedBuffer>;

    // Batch operations for gas efficiency
    #[endpoint(batchTransfer)]
    fn batch_transfer(
        &self,
        token_id: TokenIdentifier,
        recipients: MultiValueEncoded<ManagedAddress>,
        amounts: MultiValueEncoded<BigUint>
    ) {
        // Efficient batch token transfer implementation
    }

    // Get optimal gas limit for operations
    #[view(getOptimalGasLimit)]
    fn get_optimal_gas_limit(&self, operation_type: ManagedBuffer) -> u64 {
        // Calculate optimal gas based on operation type
        // Default example value
        64_000_000
    }
}"""

TOKEN_RATIO = """// MultiversX Token Ratio Handler
#[multiversx_sc::contract]
pub trait TokenRatioModule {
    // Store the token ratio mapping
    #[storage_mapper("tokenRatios")]
    fn token_ratios(&self, token_id: &TokenIdentifier) -> SingleValueMapper<BigUint>;

    // Set token to EGLD ratio
    #[only_owner]
    #[endpoint(setTokenRatio)]
    fn set_token_ratio(
        &self,
        token_id: TokenIdentifier,
        ratio: BigUint
    ) {
        self.token_ratios(&token_id).set(ratio);
    }

    // Get token to EGLD ratio
    #[view(getTokenRatio)]
    fn get_token_ratio(&self, token_id: TokenIdentifier) -> BigUint {
        self.token_ratios(&token_id).get()
    }
}"""

NFT = """// NFT implementation with MultiversX optimizations
#[multiversx_sc::contract]
pub trait NftModule {
    #[init]
    fn init(&self) {
        // Initialize NFT collection properties
    }

    #[only_owner]
    #[payable("EGLD")]
    #[endpoint(issueNftCollection)]
    fn issue_nft_collection(
        &self,
        collection_name: ManagedBuffer,
        collection_ticker: ManagedBuffer,
        #[payment] issue_cost: BigUint
    ) {
        // NFT Collection issuance logic
    }

    #[only_owner]
    #[endpoint(createNft)]
    fn create_nft(
        &self,
        name: ManagedBuffer,
        royalties: BigUint,
        uri: ManagedBuffer,
        attributes: ManagedBuffer
    ) -> u64 {
        // NFT creation logic with gas optimizations
        // Returns the NFT nonce
        1u64 // Placeholder return
    }

    #[only_owner]
    #[endpoint(transferNft)]
    fn transfer_nft(
        &self,
        to: ManagedAddress,
        token_id: TokenIdentifier,
        nonce: u64,
        amount: BigUint
    ) {
        // NFT transfer logic
    }
}"""
